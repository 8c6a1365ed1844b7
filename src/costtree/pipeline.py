from __future__ import annotations

from typing import Sequence

from costtree.logging import get_logger
from costtree.models import ROOT_ID, Expense, Unit, UnitId
from costtree.services.costs import compute_cost_map
from costtree.services.present import OutputNode, present
from costtree.services.tree import build_tree, iter_nodes


def run(units: Sequence[Unit], expenses: Sequence[Expense], root_id: UnitId = ROOT_ID) -> list[OutputNode]:
    log = get_logger(__name__)
    cost_map = compute_cost_map(expenses)
    tree = build_tree(units, cost_map, parent_id=root_id)
    attached = sum(1 for _ in iter_nodes(tree))
    log.info(
        "tree.built",
        units=len(units),
        expenses=len(expenses),
        attached=attached,
        dropped=len(units) - attached,
    )
    return present(tree)
