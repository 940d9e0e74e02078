"""
convert.py

Batch entry point.

Goal:
- Resolve TranscriptOptions (interactive prompt, or command-line flags)
- Load a DeepSeek export conversations.json (top level must be a list)
- For each conversation, in file order:
    - parse the mapping into an ordered list of nodes
    - render the kept messages as Markdown
    - write <sanitized title>.md, or skip it when nothing was kept
- Print a summary

A broken conversation is reported and skipped; it never stops the batch.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Set, Tuple

from .conversation import conversation_title, parse_conversation
from .filenames import MARKDOWN_EXTENSION, sanitize_filename, unique_filename
from .model import TranscriptOptions
from .options import options_from_flags, print_options_summary, prompt_options
from .renderers import render_markdown

DEFAULT_INPUT = "conversations.json"
DEFAULT_OUTPUT_DIR = "conversationsMD"


class ExportFormatError(ValueError):
    """The input file parsed as JSON but is not a list of conversations."""


@dataclass
class BatchResult:
    """
    Outcome of one run.

    - written: paths of the Markdown files written
    - skipped: titles with no qualifying content
    - failed: (title, error message) for conversations that raised
    """

    written: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.written) + len(self.skipped) + len(self.failed)


def load_conversations(input_path: Path) -> List[Any]:
    """
    Read and parse the whole export file.

    Raises OSError when the file cannot be read, json.JSONDecodeError on
    invalid JSON and ExportFormatError when the top level is not a list.
    """
    raw_text = input_path.read_text(encoding="utf-8")
    raw_data = json.loads(raw_text)

    if not isinstance(raw_data, list):
        raise ExportFormatError("Expected the top-level JSON to be a list of conversations.")

    return raw_data


def transcribe_conversation(
    raw: Any,
    options: TranscriptOptions,
    out_dir: Path,
    used_names: Set[str],
) -> Tuple[str, Optional[Path], int]:
    """
    Transcribe one raw conversation.

    Returns (filename, written path or None when skipped, node count).
    Errors propagate to the caller.
    """
    convo = parse_conversation(raw)
    markdown = render_markdown(convo, options)

    base = sanitize_filename(convo.title)
    if markdown is None:
        return f"{base}{MARKDOWN_EXTENSION}", None, len(convo.nodes)

    filename = unique_filename(base, used_names)
    out_path = out_dir / filename
    out_path.write_text(markdown, encoding="utf-8")
    return filename, out_path, len(convo.nodes)


def run_batch(
    conversations: List[Any],
    options: TranscriptOptions,
    out_dir: Path,
) -> BatchResult:
    """
    Transcribe every conversation in order, reporting each outcome.
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    result = BatchResult()
    used_names: Set[str] = set()

    for raw in conversations:
        title = conversation_title(raw)
        try:
            filename, out_path, node_count = transcribe_conversation(
                raw, options, out_dir, used_names
            )
        except Exception as exc:
            result.failed.append((title, str(exc)))
            print(f"✗ Failed: {title} - {exc}", file=sys.stderr)
            continue

        if out_path is None:
            result.skipped.append(title)
            print(f"⚠ Skipped: {filename} (no qualifying content)")
        else:
            result.written.append(out_path)
            print(f"✓ Saved: {filename} ({node_count} nodes)")

    return result


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Convert a DeepSeek conversations.json export into one Markdown "
            "file per conversation."
        )
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Path to conversations.json (defaults to {DEFAULT_INPUT})",
    )

    parser.add_argument(
        "--out",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output folder for Markdown files (defaults to {DEFAULT_OUTPUT_DIR})",
    )

    # Any of these skips the interactive questions.
    parser.add_argument("--keep-user", action="store_true", help='Keep "Me" messages')
    parser.add_argument(
        "--keep-reasoning", action="store_true", help="Keep DeepSeek preprocessing content"
    )
    parser.add_argument(
        "--keep-content", action="store_true", help="Keep DeepSeek main content"
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not ask questions; use only the --keep-* flags",
    )

    args = parser.parse_args(argv)

    if args.no_prompt or args.keep_user or args.keep_reasoning or args.keep_content:
        source = options_from_flags(args.keep_user, args.keep_reasoning, args.keep_content)
    else:
        source = prompt_options

    options = source()
    print_options_summary(options)

    input_path = Path(args.input)
    out_dir = Path(args.out)

    out_dir.mkdir(parents=True, exist_ok=True)

    if not input_path.exists():
        raise SystemExit(f"❌ Error: input file not found: {input_path}")

    print(f"📂 Reading file: {input_path.resolve()}")
    try:
        conversations = load_conversations(input_path)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"❌ Error: {exc}")

    print(f"🔄 Processing {len(conversations)} conversations...")
    result = run_batch(conversations, options, out_dir)

    print()
    print("=" * 72)
    print("✅ Done")
    print("=" * 72)
    print(f"Conversations: {result.total}")
    print(f"Written:       {len(result.written)}")
    print(f"Skipped:       {len(result.skipped)}")
    print(f"Failed:        {len(result.failed)}")
    print(f"Output:        {out_dir.resolve()}")
    print()


if __name__ == "__main__":
    main()
