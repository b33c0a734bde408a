"""Tests for shop closure entity."""

from datetime import date

import pytest
from pydantic import ValidationError

from shopledger.core.entities import ClosureReason, ShopClosure


class TestShopClosure:
    def test_defaults(self):
        closure = ShopClosure(date=date(2024, 3, 15), reason=ClosureReason.HOLIDAY)
        assert closure.is_full_day is True
        assert closure.closed_hours == 0.0
        assert closure.description == ""

    def test_sick_leave_wire_value(self):
        closure = ShopClosure.model_validate(
            {"date": "2024-03-15", "reason": "Sick Leave", "isFullDay": False}
        )
        assert closure.reason is ClosureReason.SICK_LEAVE
        assert closure.is_full_day is False
        assert closure.model_dump(mode="json", by_alias=True)["reason"] == "Sick Leave"

    def test_unknown_reason_rejected(self):
        with pytest.raises(ValidationError):
            ShopClosure(date=date(2024, 3, 15), reason="Vacation")

    def test_description_max_length(self):
        with pytest.raises(ValidationError):
            ShopClosure(
                date=date(2024, 3, 15),
                reason=ClosureReason.OTHER,
                description="x" * 201,
            )

    @pytest.mark.parametrize("hours", [-1, 24.5])
    def test_closed_hours_bounds(self, hours):
        with pytest.raises(ValidationError):
            ShopClosure(
                date=date(2024, 3, 15),
                reason=ClosureReason.OTHER,
                is_full_day=False,
                closed_hours=hours,
            )
