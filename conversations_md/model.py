"""
model.py

Internal data shapes used by the transcriber.

This file defines: TranscriptOptions, Role, Message, MessageNode, Conversation.
It does NOT load JSON and it does NOT write output files.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


# Title used when a conversation record has no (or an empty) title.
UNTITLED = "Untitled Conversation"


class Role(Enum):
    """
    Who produced a message.

    The export has no explicit role field. A message whose reasoning_content
    is null is written by the user; anything else came from DeepSeek.
    """

    USER = "user"
    GENERATED = "generated"


@dataclass(frozen=True)
class TranscriptOptions:
    """
    Which message categories end up in the Markdown output.

    - keep_user_messages: the user's own prompts
    - keep_deepseek_preprocessing: DeepSeek reasoning ("deep think") text
    - keep_deepseek_content: DeepSeek's final answer text
    """

    keep_user_messages: bool = False
    keep_deepseek_preprocessing: bool = False
    keep_deepseek_content: bool = False


@dataclass(frozen=True)
class Message:
    """
    The payload of one mapping node.

    - role: USER or GENERATED
    - content: primary text of the message
    - reasoning: preprocessing text; always None for user messages
    """

    role: Role
    content: str
    reasoning: Optional[str] = None


@dataclass(frozen=True)
class MessageNode:
    """
    One entry of a conversation mapping, in transcript order.

    message is None for structural nodes that carry no payload.
    """

    id: str
    message: Optional[Message] = None


@dataclass
class Conversation:
    """
    One exported chat.

    - title: conversation title (placeholder when missing)
    - nodes: mapping entries, sentinel removed, ordered by numeric id
    """

    title: str
    nodes: List[MessageNode] = field(default_factory=list)
