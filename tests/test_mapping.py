"""
Tests for node ordering and role classification.
"""

from conversations_md.mapping import (
    build_message_nodes,
    classify_role,
    node_to_message,
    numeric_id,
    order_message_nodes,
)
from conversations_md.model import Role


def test_sentinel_is_excluded():
    """The "root" entry never shows up in the ordered nodes."""
    mapping = {"root": {"message": {"content": "x", "reasoning_content": None}}, "1": {}}

    ids = [node_id for node_id, _ in order_message_nodes(mapping)]

    assert ids == ["1"]


def test_numeric_order_not_string_order():
    """"10" sorts after "9", unlike a plain string sort."""
    mapping = {"10": {}, "9": {}, "root": {}, "1": {}, "2": {}}

    ids = [node_id for node_id, _ in order_message_nodes(mapping)]

    assert ids == ["1", "2", "9", "10"]


def test_non_numeric_ids_go_last_in_encounter_order():
    mapping = {"b": {}, "3": {}, "a": {}, "1": {}}

    ids = [node_id for node_id, _ in order_message_nodes(mapping)]

    assert ids == ["1", "3", "b", "a"]


def test_numeric_id():
    assert numeric_id("42") == 42
    assert numeric_id(" 7 ") == 7
    assert numeric_id("root") is None
    assert numeric_id("1.5") is None


def test_classify_role():
    """null or missing reasoning means user; any string, even empty, means generated."""
    assert classify_role({"content": "hi", "reasoning_content": None}) is Role.USER
    assert classify_role({"content": "hi"}) is Role.USER
    assert classify_role({"content": "hi", "reasoning_content": ""}) is Role.GENERATED
    assert classify_role({"content": "hi", "reasoning_content": "hmm"}) is Role.GENERATED


def test_node_without_payload():
    assert node_to_message({}) is None
    assert node_to_message({"message": None}) is None


def test_node_to_message_generated():
    msg = node_to_message({"message": {"content": "Answer", "reasoning_content": "Thinking..."}})

    assert msg.role is Role.GENERATED
    assert msg.content == "Answer"
    assert msg.reasoning == "Thinking..."


def test_node_to_message_user_has_no_reasoning():
    msg = node_to_message({"message": {"content": "Hi", "reasoning_content": None}})

    assert msg.role is Role.USER
    assert msg.reasoning is None


def test_empty_nodes_keep_their_place():
    """Nodes without payload stay in the sequence with message=None."""
    mapping = {
        "root": {},
        "2": {"message": {"content": "b", "reasoning_content": None}},
        "1": {"message": None},
        "3": None,
    }

    nodes = build_message_nodes(mapping)

    assert [n.id for n in nodes] == ["1", "2", "3"]
    assert nodes[0].message is None
    assert nodes[1].message.content == "b"
    assert nodes[2].message is None
