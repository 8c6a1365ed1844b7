from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from costtree.models import Expense, UnitId


def compute_cost_map(expenses: Iterable[Expense]) -> dict[UnitId, Decimal]:
    costs: dict[UnitId, Decimal] = {}
    for expense in expenses:
        if expense.owner_id is None:
            continue
        costs[expense.owner_id] = costs.get(expense.owner_id, Decimal(0)) + expense.amount
    return costs
