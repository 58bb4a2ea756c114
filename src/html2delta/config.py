"""Local configuration for html2delta."""

from __future__ import annotations

import os


DEFAULT_PARSER = "lxml"
DEFAULT_MAX_DEPTH = 64
SUPPORTED_PARSERS = ("lxml", "html.parser", "html5lib")

# BeautifulSoup tree builder used to turn markup into a DOM.
HTML2DELTA_PARSER = os.getenv("HTML2DELTA_PARSER", DEFAULT_PARSER)
# Nesting depth past which elements are flattened instead of recursed into.
HTML2DELTA_MAX_DEPTH = int(os.getenv("HTML2DELTA_MAX_DEPTH", str(DEFAULT_MAX_DEPTH)))
