from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

UnitId = Union[int, str]

# parentId of top-level units; compared as text, so the API's "0" matches too
ROOT_ID: UnitId = 0


def _optional_id(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


@dataclass(slots=True, frozen=True)
class Unit:
    id: UnitId
    parent_id: Optional[UnitId]
    name: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Unit":
        return cls(
            id=str(payload["id"]),
            parent_id=_optional_id(payload.get("parentId")),
            name=payload["name"],
        )


@dataclass(slots=True, frozen=True)
class Expense:
    owner_id: Optional[UnitId]
    amount: Decimal

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Expense":
        return cls(
            owner_id=_optional_id(payload.get("companyId")),
            amount=Decimal(str(payload["price"])),
        )


@dataclass(slots=True)
class TreeNode:
    id: UnitId
    name: str
    parent_id: Optional[UnitId]
    direct_cost: Decimal
    subtree_cost: Decimal
    children: list[TreeNode] = field(default_factory=list)
