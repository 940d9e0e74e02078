"""
mapping.py

Helpers for reading the export "mapping" dict.

The mapping is unordered. Node ids are numeric strings ("1", "2", ...), plus a
structural "root" node that never carries a message.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .model import Message, MessageNode, Role

SENTINEL_ID = "root"


def numeric_id(node_id: str) -> Optional[int]:
    """Integer value of a node id, or None if the id is not a number."""
    try:
        return int(str(node_id).strip())
    except ValueError:
        return None


def order_message_nodes(mapping: Dict[str, Any]) -> List[Tuple[str, Dict[str, Any]]]:
    """
    Return (node_id, node) pairs in transcript order.

    - the sentinel "root" entry is dropped
    - numeric ids sort ascending by value ("10" after "9")
    - non-numeric ids go last, in the order they appear in the mapping
    """
    ranked: List[Tuple[Tuple[int, int, int], str, Dict[str, Any]]] = []

    for position, (node_id, node) in enumerate(mapping.items()):
        node_id = str(node_id)
        if node_id == SENTINEL_ID:
            continue

        value = numeric_id(node_id)
        if value is None:
            key = (1, 0, position)
        else:
            key = (0, value, position)

        ranked.append((key, node_id, node if isinstance(node, dict) else {}))

    ranked.sort(key=lambda x: x[0])
    return [(node_id, node) for _, node_id, node in ranked]


def classify_role(message: Dict[str, Any]) -> Role:
    """
    USER when reasoning_content is null or missing, GENERATED otherwise.

    An empty string still means GENERATED: DeepSeek answered without
    producing any reasoning text.
    """
    if message.get("reasoning_content") is None:
        return Role.USER
    return Role.GENERATED


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def node_to_message(node: Dict[str, Any]) -> Optional[Message]:
    """
    Convert a raw mapping node into a Message.

    Returns None when the node has no payload.
    """
    msg = node.get("message")
    if not msg or not isinstance(msg, dict):
        return None

    role = classify_role(msg)
    if role is Role.USER:
        return Message(role=role, content=_text(msg.get("content")))

    return Message(
        role=role,
        content=_text(msg.get("content")),
        reasoning=_text(msg.get("reasoning_content")),
    )


def build_message_nodes(mapping: Dict[str, Any]) -> List[MessageNode]:
    return [
        MessageNode(id=node_id, message=node_to_message(node))
        for node_id, node in order_message_nodes(mapping)
    ]
