from decimal import Decimal

import pytest

from costtree.models import Expense, Unit


def test_unit_from_payload():
    unit = Unit.from_payload(
        {"id": "uuid-2", "createdAt": "2021-02-25T10:35:32.978Z", "name": "Stamm LLC", "parentId": "uuid-1"}
    )
    assert unit == Unit(id="uuid-2", parent_id="uuid-1", name="Stamm LLC")


def test_unit_from_payload_without_parent():
    unit = Unit.from_payload({"id": 7, "name": "Top"})
    assert unit.id == "7"
    assert unit.parent_id is None


def test_expense_from_payload_keeps_only_calculation_fields():
    expense = Expense.from_payload(
        {
            "id": "uuid-t1",
            "employeeName": "Garry Bins",
            "departure": "Saint Kitts and Nevis",
            "destination": "Sierra Leone",
            "price": 332.1,
            "companyId": "uuid-3",
        }
    )
    assert expense == Expense(owner_id="uuid-3", amount=Decimal("332.1"))


def test_expense_from_payload_requires_price():
    with pytest.raises(KeyError):
        Expense.from_payload({"companyId": "uuid-3"})
