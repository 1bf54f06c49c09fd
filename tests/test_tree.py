from zerocms.tree import list_to_tree
from zerocms.types import Department, Menu, Role


def _walk(nodes):
    for node in nodes:
        yield node.id
        yield from _walk(node.children)


def test_empty_input_gives_empty_tree():
    assert list_to_tree([], "id") == []


def test_roots_keep_input_order():
    roles = [Role(id=3, name="c"), Role(id=1, name="a"), Role(id=2, name="b")]
    tree = list_to_tree(roles, "id")
    assert [role.id for role in tree] == [3, 1, 2]


def test_children_are_nested_under_parents():
    departments = [
        Department(id=1, name="root"),
        Department(id=2, parent_id=1, name="child"),
        Department(id=3, parent_id=2, name="grandchild"),
        Department(id=4, parent_id=1, name="second child"),
    ]
    tree = list_to_tree(departments, "id")
    assert [d.id for d in tree] == [1]
    assert [d.id for d in tree[0].children] == [2, 4]
    assert [d.id for d in tree[0].children[0].children] == [3]
    assert tree[0].children[1].children == []


def test_child_before_parent_is_still_attached():
    roles = [Role(id=5, parent_id=6), Role(id=6)]
    tree = list_to_tree(roles, "id")
    assert [role.id for role in tree] == [6]
    assert [role.id for role in tree[0].children] == [5]


def test_orphans_are_dropped():
    roles = [Role(id=1), Role(id=2, parent_id=99)]
    tree = list_to_tree(roles, "id")
    assert [role.id for role in tree] == [1]
    assert tree[0].children == []


def test_menu_tree_uses_menu_id():
    menus = [
        Menu(menu_id=10, menu_name="system"),
        Menu(menu_id=11, parent_id=10, menu_name="users"),
        Menu(menu_id=12, parent_id=10, menu_name="roles"),
    ]
    tree = list_to_tree(menus, "menu_id")
    assert [m.menu_id for m in tree] == [10]
    assert [m.menu_name for m in tree[0].children] == ["users", "roles"]


def test_every_kept_record_appears_once():
    records = [Role(id=i, parent_id=(0 if i % 3 == 0 else i - 1)) for i in range(10)]
    tree = list_to_tree(records, "id")
    seen = list(_walk(tree))
    assert sorted(seen) == list(range(10))