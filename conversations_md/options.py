"""
options.py

Configuration sources for the transcriber.

A configuration source is any callable that returns TranscriptOptions.
The transcriber only ever sees the resulting (immutable) options, so the
interactive prompt can be swapped for command-line flags without touching it.
"""

from __future__ import annotations

from typing import Callable, Optional

from .model import TranscriptOptions

AFFIRMATIVE = "y"

USER_QUESTION = 'Keep "Me" messages? (y/n) '
PREPROCESSING_QUESTION = "Keep DeepSeek preprocessing content? (y/n) "
CONTENT_QUESTION = "Keep DeepSeek main content? (y/n) "

Ask = Callable[[str], str]
OptionsSource = Callable[[], TranscriptOptions]


def ask_yes_no(question: str, ask: Optional[Ask] = None) -> bool:
    """
    Ask one question and return True only when the answer is exactly "y".

    The answer is trimmed and case-folded first. Anything else, including
    "yes" or closed stdin, counts as "no"; there is no re-prompting.
    """
    if ask is None:
        ask = input
    try:
        answer = ask(question)
    except EOFError:
        return False
    return answer.strip().casefold() == AFFIRMATIVE


def prompt_options(ask: Optional[Ask] = None) -> TranscriptOptions:
    """Interactive source: three yes/no questions on stdin."""
    print("Choose what to keep (answer y/n):")

    return TranscriptOptions(
        keep_user_messages=ask_yes_no(USER_QUESTION, ask),
        keep_deepseek_preprocessing=ask_yes_no(PREPROCESSING_QUESTION, ask),
        keep_deepseek_content=ask_yes_no(CONTENT_QUESTION, ask),
    )


def options_from_flags(
    keep_user: bool = False,
    keep_reasoning: bool = False,
    keep_content: bool = False,
) -> OptionsSource:
    """Non-interactive source built from command-line flags."""

    def source() -> TranscriptOptions:
        return TranscriptOptions(
            keep_user_messages=keep_user,
            keep_deepseek_preprocessing=keep_reasoning,
            keep_deepseek_content=keep_content,
        )

    return source


def _mark(flag: bool) -> str:
    return "✓" if flag else "✗"


def print_options_summary(options: TranscriptOptions) -> None:
    print()
    print("Configuration:")
    print(f"  [{_mark(options.keep_user_messages)}] Keep user messages")
    print(f"  [{_mark(options.keep_deepseek_preprocessing)}] Keep DeepSeek preprocessing")
    print(f"  [{_mark(options.keep_deepseek_content)}] Keep DeepSeek content")
    print()
