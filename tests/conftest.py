"""Test setup for html2delta."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from html2delta.decoder import DecoderOptions  # noqa: E402


@pytest.fixture
def strict_options() -> DecoderOptions:
    """Options using html.parser, which keeps markup structure exactly as written."""
    return DecoderOptions(parser="html.parser")
