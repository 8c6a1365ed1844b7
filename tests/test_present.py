import json
from decimal import Decimal

from costtree.models import TreeNode
from costtree.services.present import present, render_json, render_text


def _tree() -> list[TreeNode]:
    leaf = TreeNode(id=2, name="B", parent_id=1, direct_cost=Decimal("5.5"), subtree_cost=Decimal("5.5"))
    return [
        TreeNode(
            id=1,
            name="A",
            parent_id=0,
            direct_cost=Decimal("10"),
            subtree_cost=Decimal("15.5"),
            children=[leaf],
        )
    ]


def test_present_drops_transient_fields_and_orders_keys():
    output = present(_tree())

    assert list(output[0]) == ["id", "name", "cost", "children"]
    assert list(output[0]["children"][0]) == ["id", "name", "cost", "children"]
    assert "parent_id" not in output[0]
    assert "direct_cost" not in output[0]["children"][0]
    assert output[0]["cost"] == Decimal("15.5")


def test_present_leaves_tree_untouched():
    tree = _tree()
    present(tree)
    assert tree[0].direct_cost == Decimal("10")
    assert tree[0].children[0].parent_id == 1


def test_render_json_numbers():
    text = render_json(present(_tree()))

    assert json.loads(text) == [
        {
            "id": 1,
            "name": "A",
            "cost": 15.5,
            "children": [{"id": 2, "name": "B", "cost": 5.5, "children": []}],
        }
    ]
    assert '"cost": 15.5' in text


def test_render_json_integral_cost_is_int():
    output = [{"id": "uuid-1", "name": "Webprovise Corp", "cost": Decimal("52983.00"), "children": []}]
    assert json.loads(render_json(output, indent=None))[0]["cost"] == 52983


def test_render_text_indents_children():
    assert render_text(present(_tree())) == "A [1]: 15.5\n  B [2]: 5.5"


def test_render_empty():
    assert render_json([]) == "[]"
    assert render_text([]) == ""


def test_render_json_two_decimal_cost_is_exact():
    output = [{"id": "uuid-3", "name": "Price and Sons", "cost": Decimal("52983.17"), "children": []}]
    assert render_json(output, indent=None) == '[{"id": "uuid-3", "name": "Price and Sons", "cost": 52983.17, "children": []}]'
