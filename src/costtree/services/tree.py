"""Rebuild the unit hierarchy from parent pointers and roll costs up it."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Iterator, Mapping, Sequence

from costtree.models import ROOT_ID, TreeNode, Unit, UnitId


class HierarchyCycleError(ValueError):
    def __init__(self, unit_id: UnitId) -> None:
        super().__init__(f"unit {unit_id!r} is its own ancestor")
        self.unit_id = unit_id


def group_by_parent(units: Iterable[Unit], root_id: UnitId = ROOT_ID) -> dict[UnitId, list[Unit]]:
    """Index units by parent id, keeping input order within each group.

    Units without a parent, or whose parent equals ``root_id`` as text
    (``0`` and ``"0"`` alike), are filed under ``root_id``.
    """
    root_key = str(root_id)
    groups: dict[UnitId, list[Unit]] = {}
    for unit in units:
        if unit.parent_id is None or str(unit.parent_id) == root_key:
            key = root_id
        else:
            key = unit.parent_id
        groups.setdefault(key, []).append(unit)
    return groups


def build_tree(
    units: Sequence[Unit],
    cost_map: Mapping[UnitId, Decimal],
    parent_id: UnitId = ROOT_ID,
) -> list[TreeNode]:
    """Return the forest hanging off ``parent_id``.

    Units whose parent never resolves to ``parent_id`` are left out. Each
    node's ``subtree_cost`` is its direct cost plus the subtree costs of its
    children.
    """
    groups = group_by_parent(units, root_id=parent_id)
    return _build_branch(groups, cost_map, parent_id, ancestors=set())


def _build_branch(
    groups: Mapping[UnitId, list[Unit]],
    cost_map: Mapping[UnitId, Decimal],
    parent_id: UnitId,
    ancestors: set[UnitId],
) -> list[TreeNode]:
    branch: list[TreeNode] = []
    for unit in groups.get(parent_id, ()):
        if unit.id in ancestors:
            raise HierarchyCycleError(unit.id)
        ancestors.add(unit.id)
        children = _build_branch(groups, cost_map, unit.id, ancestors)
        ancestors.discard(unit.id)
        direct_cost = cost_map.get(unit.id, Decimal(0))
        subtree_cost = direct_cost + sum((child.subtree_cost for child in children), Decimal(0))
        branch.append(
            TreeNode(
                id=unit.id,
                name=unit.name,
                parent_id=unit.parent_id,
                direct_cost=direct_cost,
                subtree_cost=subtree_cost,
                children=children,
            )
        )
    return branch


def iter_nodes(tree: Iterable[TreeNode]) -> Iterator[TreeNode]:
    for node in tree:
        yield node
        yield from iter_nodes(node.children)
