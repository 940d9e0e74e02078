from __future__ import annotations

from typing import Any, Dict

from .mapping import build_message_nodes
from .model import UNTITLED, Conversation


def conversation_title(raw: Any) -> str:
    """Title of a raw record, or the placeholder when it has none."""
    if not isinstance(raw, dict):
        return UNTITLED
    return str(raw.get("title") or UNTITLED)


def parse_conversation(raw: Dict[str, Any]) -> Conversation:
    """
    Parse one raw conversation export object into our internal Conversation.

    - drops the "root" sentinel node
    - orders the remaining nodes by numeric id

    Raises ValueError when the record is not an object or has no usable
    "mapping"; the caller reports it and moves on to the next conversation.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"expected a conversation object, got {type(raw).__name__}")

    mapping = raw.get("mapping")
    if mapping is None:
        raise ValueError("conversation has no 'mapping' field")
    if not isinstance(mapping, dict):
        raise ValueError(f"'mapping' should be an object, got {type(mapping).__name__}")

    return Conversation(
        title=conversation_title(raw),
        nodes=build_message_nodes(mapping),
    )
