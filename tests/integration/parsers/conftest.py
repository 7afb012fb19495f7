from pathlib import Path

import pytest

from mdtree.parsers.markdown_parser import MarkdownParser
from mdtree.parsers.models import BlockElement

SAMPLE_MARKDOWN = """\
# Header 1 with **bold**
*Italic* text with **bold** part
- List item 1
    - Nested item
        - Second Nested item
    Nested text without bullet
- List item 2
---
1. ***Bold Italic*** item 1
2. Ordered item 2
"""


@pytest.fixture
def markdown_dir(tmp_path: Path) -> Path:
    """Directory holding the sample document as it would sit on disk."""
    (tmp_path / "sample.md").write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    return tmp_path


@pytest.fixture
def parsed_sample(markdown_dir: Path) -> list[BlockElement]:
    text = (markdown_dir / "sample.md").read_text(encoding="utf-8")
    return MarkdownParser().parse(text)
