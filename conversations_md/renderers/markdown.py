"""
Markdown rendering for transcribed conversations.

Produces a plain Markdown document:
- a level-1 heading with the title
- one labelled block per kept message, each followed by a "---" separator

Message text is interpolated literally; nothing is escaped.
"""

from __future__ import annotations

from typing import List, Optional

from ..model import Conversation, Message, Role, TranscriptOptions

USER_LABEL = "**Me:**"
PREPROCESSING_LABEL = "**DeepSeek Preprocessing:**"
CONTENT_LABEL = "**DeepSeek Content:**"
SEPARATOR = "---\n\n"


def _section(label: str, text: str) -> str:
    return f"{label}\n{text}\n\n"


def render_message(message: Message, options: TranscriptOptions) -> str:
    """
    Render one message as a block, or "" when the options filter it out.

    A generated message keeps whichever of its two sections are enabled;
    the separator is only added when at least one section survived.
    """
    if message.role is Role.USER:
        if not options.keep_user_messages:
            return ""
        return _section(USER_LABEL, message.content) + SEPARATOR

    block = ""
    if options.keep_deepseek_preprocessing:
        block += _section(PREPROCESSING_LABEL, message.reasoning or "")
    if options.keep_deepseek_content:
        block += _section(CONTENT_LABEL, message.content)

    if not block:
        return ""
    return block + SEPARATOR


def render_markdown(convo: Conversation, options: TranscriptOptions) -> Optional[str]:
    """
    Render a conversation, or return None when no message block was kept.

    The heading alone never counts as content.
    """
    parts: List[str] = [f"# {convo.title}\n\n"]
    has_content = False

    for node in convo.nodes:
        if node.message is None:
            continue

        block = render_message(node.message, options)
        if block:
            parts.append(block)
            has_content = True

    if not has_content:
        return None
    return "".join(parts)
