import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from mdtree.observability import InMemoryMetricsHook, names
from mdtree.parsers import markdown_parser
from mdtree.parsers.markdown_parser import MarkdownParser, parse
from mdtree.parsers.models import (
    BlockElement,
    Divider,
    Header,
    ListBlock,
    ListItem,
    Paragraph,
    TextSpan,
    TextStyle,
)


def para(text: str) -> Paragraph:
    return Paragraph(text=(TextSpan(text=text),))


def list_block(*items: ListItem, ordered: bool = False) -> ListBlock:
    return ListBlock(items=items, ordered=ordered)


def item(*content: BlockElement) -> ListItem:
    return ListItem(content=content)


@pytest.fixture
def parser() -> MarkdownParser:
    return MarkdownParser()


class TestHeaders:
    def test_single_hash_is_level_one(self, parser: MarkdownParser) -> None:
        assert parser.parse("# H") == [Header(level=1, text=(TextSpan(text="H"),))]

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_levels_one_to_six(self, parser: MarkdownParser, level: int) -> None:
        result = parser.parse("#" * level + " Title")

        assert result == [Header(level=level, text=(TextSpan(text="Title"),))]

    def test_seven_hashes_is_a_paragraph(self, parser: MarkdownParser) -> None:
        assert parser.parse("####### H") == [para("####### H")]

    @pytest.mark.parametrize("line", ["#NoSpace", "###", "#"])
    def test_hash_without_space_is_a_paragraph(
        self, parser: MarkdownParser, line: str
    ) -> None:
        assert parser.parse(line) == [para(line)]

    def test_header_text_is_trimmed_and_styled(self, parser: MarkdownParser) -> None:
        result = parser.parse("##   Big **deal**   ")

        assert result == [
            Header(
                level=2,
                text=(
                    TextSpan(text="Big "),
                    TextSpan(text="deal", style=TextStyle.BOLD),
                ),
            )
        ]


class TestParagraphs:
    def test_empty_input_has_no_blocks(self, parser: MarkdownParser) -> None:
        assert parser.parse("") == []

    def test_blank_lines_are_skipped(self, parser: MarkdownParser) -> None:
        assert parser.parse("\n\n   \nText\n\n") == [para("Text")]

    def test_consecutive_lines_are_not_merged(self, parser: MarkdownParser) -> None:
        assert parser.parse("one\ntwo\nthree") == [
            para("one"),
            para("two"),
            para("three"),
        ]

    def test_indented_top_level_text_is_a_paragraph(
        self, parser: MarkdownParser
    ) -> None:
        assert parser.parse("     deep") == [para("deep")]

    def test_tabs_are_not_indentation(self, parser: MarkdownParser) -> None:
        assert parser.parse("\t# Title") == [
            Header(level=1, text=(TextSpan(text="Title"),))
        ]

    def test_carriage_returns_are_trimmed(self, parser: MarkdownParser) -> None:
        assert parser.parse("# H\r\nText\r\n") == [
            Header(level=1, text=(TextSpan(text="H"),)),
            para("Text"),
        ]


class TestDividers:
    @pytest.mark.parametrize("line", ["---", "***", "___", "  ---  "])
    def test_exact_divider_markers(self, parser: MarkdownParser, line: str) -> None:
        assert parser.parse(line) == [Divider()]

    def test_four_dashes_is_a_paragraph(self, parser: MarkdownParser) -> None:
        assert parser.parse("----") == [para("----")]

    def test_divider_between_paragraphs(self, parser: MarkdownParser) -> None:
        assert parser.parse("above\n---\nbelow") == [
            para("above"),
            Divider(),
            para("below"),
        ]


class TestLists:
    @pytest.mark.parametrize("marker", ["-", "*", "+"])
    def test_unordered_markers(self, parser: MarkdownParser, marker: str) -> None:
        assert parser.parse(f"{marker} A") == [list_block(item(para("A")))]

    def test_unordered_markers_mix_in_one_list(self, parser: MarkdownParser) -> None:
        assert parser.parse("- A\n* B\n+ C") == [
            list_block(item(para("A")), item(para("B")), item(para("C")))
        ]

    def test_ordered_list(self, parser: MarkdownParser) -> None:
        assert parser.parse("1. First\n2. Second\n10. Tenth") == [
            list_block(
                item(para("First")),
                item(para("Second")),
                item(para("Tenth")),
                ordered=True,
            )
        ]

    def test_ordinal_values_are_not_checked(self, parser: MarkdownParser) -> None:
        result = parser.parse("7. a\n3. b")

        assert result == [list_block(item(para("a")), item(para("b")), ordered=True)]

    @pytest.mark.parametrize("line", ["1.5 apples", "1.Tight", "1.", "-item", "a. b"])
    def test_near_markers_are_paragraphs(
        self, parser: MarkdownParser, line: str
    ) -> None:
        assert parser.parse(line) == [para(line)]

    def test_nested_list_by_indentation(self, parser: MarkdownParser) -> None:
        result = parser.parse("- A\n    - B\n- C")

        assert result == [
            list_block(
                item(para("A"), list_block(item(para("B")))),
                item(para("C")),
            )
        ]

    def test_marker_type_change_starts_new_list(self, parser: MarkdownParser) -> None:
        assert parser.parse("- A\n1. B") == [
            list_block(item(para("A"))),
            list_block(item(para("B")), ordered=True),
        ]

    def test_blank_line_ends_list(self, parser: MarkdownParser) -> None:
        assert parser.parse("- A\n\n- B") == [
            list_block(item(para("A"))),
            list_block(item(para("B"))),
        ]

    def test_shallower_indentation_change_ends_list(
        self, parser: MarkdownParser
    ) -> None:
        """One extra space is not enough to nest, but it breaks the sibling run."""
        assert parser.parse("- A\n - B") == [
            list_block(item(para("A"))),
            list_block(item(para("B"))),
        ]

    def test_continuation_text_belongs_to_item(self, parser: MarkdownParser) -> None:
        assert parser.parse("- A\n  more about A\n- B") == [
            list_block(item(para("A"), para("more about A")), item(para("B")))
        ]

    def test_nested_scope_ends_at_dedent(self, parser: MarkdownParser) -> None:
        result = parser.parse("- A\n    - B\n  C\n- D")

        assert result == [
            list_block(
                item(para("A"), list_block(item(para("B"))), para("C")),
                item(para("D")),
            )
        ]

    def test_header_and_divider_nest_inside_item(
        self, parser: MarkdownParser
    ) -> None:
        result = parser.parse("1. Step\n   ## Detail\n   ---")

        assert result == [
            list_block(
                item(
                    para("Step"),
                    Header(level=2, text=(TextSpan(text="Detail"),)),
                    Divider(),
                ),
                ordered=True,
            )
        ]

    def test_indented_top_level_list(self, parser: MarkdownParser) -> None:
        assert parser.parse("  - A\n  - B") == [
            list_block(item(para("A")), item(para("B")))
        ]

    def test_item_text_is_inline_parsed(self, parser: MarkdownParser) -> None:
        result = parser.parse("- **done** _soon_")

        assert result == [
            list_block(
                item(
                    Paragraph(
                        text=(
                            TextSpan(text="done", style=TextStyle.BOLD),
                            TextSpan(text=" "),
                            TextSpan(text="soon", style=TextStyle.ITALIC),
                        )
                    )
                )
            )
        ]

    @pytest.mark.parametrize("depth", [50, 1000])
    def test_deep_nesting(self, parser: MarkdownParser, depth: int) -> None:
        """Nesting far past the interpreter recursion limit still parses."""
        markdown = "\n".join("  " * level + "- x" for level in range(depth))

        block = parser.parse(markdown)[0]
        levels = 0
        while isinstance(block, ListBlock):
            levels += 1
            content = block.items[0].content
            assert content[0] == para("x")
            block = content[1] if len(content) > 1 else None

        assert levels == depth


class TestTotality:
    @pytest.mark.parametrize(
        "markdown",
        [
            "",
            "\n",
            "   ",
            "#",
            "- ",
            "1.",
            "**",
            "_",
            "***\n___\n---",
            "-\n  -\n    -",
            "\t\t",
            "####### ",
            "- a\n\t- b\n  \t- c",
            "1. a\n   - b\n     1. c\n- d",
            "# **unclosed\n- _also",
        ],
    )
    def test_parse_never_raises(self, parser: MarkdownParser, markdown: str) -> None:
        assert isinstance(parser.parse(markdown), list)

    def test_parsing_is_deterministic(self, parser: MarkdownParser) -> None:
        markdown = "# T\n- a\n    - b\n1. c\n---\ntext"

        assert parser.parse(markdown) == parser.parse(markdown)

    def test_shared_parser_across_threads(self, parser: MarkdownParser) -> None:
        inputs = [f"# Doc {n}\n- item {n}\n    - child {n}" for n in range(20)]
        expected = [parser.parse(text) for text in inputs]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(parser.parse, inputs))

        assert results == expected

    def test_module_parse_uses_default_parser(self) -> None:
        assert parse("- A\n    - B\n- C") == MarkdownParser().parse("- A\n    - B\n- C")


class TestParserMetrics:
    def test_records_parse_metrics(self) -> None:
        hook = InMemoryMetricsHook()
        parser = MarkdownParser(metrics_hook=hook)

        parser.parse("a\n\nb")

        assert hook.names() == [
            names.MARKDOWN_PARSE_DURATION,
            names.MARKDOWN_PARSE_TOTAL,
            names.MARKDOWN_LINES_PROCESSED,
            names.MARKDOWN_BLOCKS_CREATED,
        ]
        assert hook.values(names.MARKDOWN_PARSE_TOTAL) == [1]
        assert hook.values(names.MARKDOWN_LINES_PROCESSED) == [3]
        assert hook.values(names.MARKDOWN_BLOCKS_CREATED) == [2]


class TestDefaultParser:
    def test_default_parser_is_built_on_first_use(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        markdown_parser._default_parser.cache_clear()
        assert markdown_parser._default_parser.cache_info().currsize == 0

        with caplog.at_level(logging.INFO, logger="mdtree.parsers.markdown_parser"):
            parse("- a")
            parse("- b")

        initialized = [r for r in caplog.records if "Initialized" in r.getMessage()]
        assert len(initialized) == 1

    def test_default_parser_is_reused(self) -> None:
        assert markdown_parser._default_parser() is markdown_parser._default_parser()
