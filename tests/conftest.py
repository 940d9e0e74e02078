"""
Pytest configuration and fixtures for the conversations_md tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from conversations_md.model import TranscriptOptions


@pytest.fixture
def hello_conversation():
    """One user message and one DeepSeek answer, plus the root sentinel."""
    return {
        "title": "Hello",
        "mapping": {
            "root": {},
            "1": {"message": {"content": "Hi", "reasoning_content": None}},
            "2": {"message": {"content": "Answer", "reasoning_content": "Thinking..."}},
        },
    }


@pytest.fixture
def keep_all():
    return TranscriptOptions(
        keep_user_messages=True,
        keep_deepseek_preprocessing=True,
        keep_deepseek_content=True,
    )


@pytest.fixture
def keep_none():
    return TranscriptOptions()


@pytest.fixture
def sample_export_path():
    """Path to the bundled sample export."""
    return project_root / "examples" / "conversations_sample.json"
