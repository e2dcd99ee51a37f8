import pytest

from fifokit.hlist import HlistHead, HlistNode


def _build(*owners):
    head = HlistHead()
    nodes = [HlistNode(owner) for owner in owners]
    for node in reversed(nodes):
        head.add_head(node)
    return head, nodes


def test_new_head_is_empty():
    head = HlistHead()
    assert head.is_empty()
    assert list(head.entries()) == []


def test_new_node_is_unhashed():
    node = HlistNode("a")
    assert node.is_unhashed()
    assert node.owner == "a"


def test_add_head_gives_stack_order():
    head = HlistHead()
    for owner in ("a", "b", "c"):
        head.add_head(HlistNode(owner))
    assert list(head.entries()) == ["c", "b", "a"]
    assert not head.is_empty()


def test_add_head_links_back_references():
    head, nodes = _build("a", "b")
    assert nodes[0].pprev is head
    assert nodes[1].pprev is nodes[0]
    assert not nodes[0].is_unhashed()


def test_iteration_yields_nodes():
    head, nodes = _build("a", "b", "c")
    assert list(head) == nodes


def test_remove_middle():
    head, nodes = _build("a", "b", "c")
    nodes[1].remove()
    assert list(head.entries()) == ["a", "c"]
    assert nodes[2].pprev is nodes[0]
    assert nodes[1].is_unhashed()


def test_remove_first():
    head, nodes = _build("a", "b")
    nodes[0].remove()
    assert head.first is nodes[1]
    assert nodes[1].pprev is head


def test_remove_last_leaves_empty():
    head, nodes = _build("a")
    nodes[0].remove()
    assert head.is_empty()


def test_remove_unhashed_raises():
    with pytest.raises(ValueError):
        HlistNode("a").remove()


def test_remove_init_on_unhashed_is_harmless():
    head, _ = _build("a")
    loose = HlistNode("x")
    loose.remove_init()
    assert loose.is_unhashed()
    assert list(head.entries()) == ["a"]


def test_remove_init_unlinks():
    head, nodes = _build("a", "b")
    nodes[0].remove_init()
    assert list(head.entries()) == ["b"]
    assert nodes[0].is_unhashed()
    assert nodes[0].next is None


def test_removal_during_iteration():
    head, nodes = _build("a", "b", "c", "d")
    for node in head:
        if node.owner in ("b", "c"):
            node.remove()
    assert list(head.entries()) == ["a", "d"]


def test_add_before_first():
    head, nodes = _build("a", "b")
    new = HlistNode("x")
    new.add_before(nodes[0])
    assert list(head.entries()) == ["x", "a", "b"]
    assert head.first is new
    assert new.pprev is head


def test_add_before_middle():
    head, nodes = _build("a", "b")
    new = HlistNode("x")
    new.add_before(nodes[1])
    assert list(head.entries()) == ["a", "x", "b"]
    assert nodes[1].pprev is new


def test_add_before_unlinked_raises():
    with pytest.raises(ValueError):
        HlistNode("x").add_before(HlistNode("y"))


def test_add_behind_last():
    head, nodes = _build("a", "b")
    new = HlistNode("x")
    new.add_behind(nodes[1])
    assert list(head.entries()) == ["a", "b", "x"]
    assert new.next is None


def test_add_behind_middle():
    head, nodes = _build("a", "b")
    new = HlistNode("x")
    new.add_behind(nodes[0])
    assert list(head.entries()) == ["a", "x", "b"]
    assert nodes[1].pprev is new


def test_fake_node():
    node = HlistNode("a")
    assert not node.is_fake()
    node.add_fake()
    assert node.is_fake()
    assert not node.is_unhashed()


def test_fake_node_can_be_removed():
    node = HlistNode("a")
    node.add_fake()
    node.remove()
    assert node.is_unhashed()


def test_singular_node():
    head, nodes = _build("a")
    assert nodes[0].is_singular_node(head)
    other = HlistNode("b")
    head.add_head(other)
    assert not nodes[0].is_singular_node(head)
    assert not other.is_singular_node(head)


def test_move_list():
    old, nodes = _build("a", "b")
    new = HlistHead()
    old.move_list(new)
    assert old.is_empty()
    assert list(new.entries()) == ["a", "b"]
    assert nodes[0].pprev is new


def test_move_empty_list():
    old = HlistHead()
    new, _ = _build("z")
    old.move_list(new)
    assert new.is_empty()


def test_iter_from():
    head, nodes = _build("a", "b", "c")
    assert list(nodes[1].iter_from()) == ["b", "c"]
    assert list(nodes[0].iter_from()) == list(head.entries())