from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Iterable, Sequence

from costtree.models import TreeNode

OutputNode = dict[str, Any]


def present(tree: Iterable[TreeNode]) -> list[OutputNode]:
    """Strip transient fields and key each node as id, name, cost, children."""
    return [
        {
            "id": node.id,
            "name": node.name,
            "cost": node.subtree_cost,
            "children": present(node.children),
        }
        for node in tree
    ]


def _encode_decimal(value: Any) -> Any:
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def render_json(output: Sequence[OutputNode], indent: int | None = 2) -> str:
    return json.dumps(output, indent=indent, ensure_ascii=False, default=_encode_decimal)


def render_text(output: Sequence[OutputNode]) -> str:
    lines: list[str] = []
    _render_lines(output, 0, lines)
    return "\n".join(lines)


def _render_lines(nodes: Sequence[OutputNode], depth: int, lines: list[str]) -> None:
    for node in nodes:
        lines.append(f"{'  ' * depth}{node['name']} [{node['id']}]: {node['cost']}")
        _render_lines(node["children"], depth + 1, lines)
