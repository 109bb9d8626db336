"""Unit tests for the markup parser."""

import time

import pytest

from devnet.domain.model import (
    BareUrl,
    Bold,
    CodeBlock,
    Heading,
    InlineCode,
    Italic,
    LineBreak,
    Link,
    ListItem,
    Mention,
    Paragraph,
    PlainText,
    Quote,
    RenderNode,
)
from devnet.domain.service import extract_mentions, parse
from devnet.domain.service.markup import display_url, parse_inline


class TestBlocks:
    """Tests for line-level segmentation."""

    def test_empty_text(self):
        """Empty input renders nothing."""
        assert parse("") == []

    def test_plain_text_is_a_paragraph(self):
        """Plain text becomes a single paragraph."""
        assert parse("hello world") == [
            Paragraph(children=[PlainText(text="hello world")])
        ]

    @pytest.mark.parametrize(
        "line,level,rest",
        [("# Title", 1, "Title"), ("## Title", 2, "Title"), ("### Title", 3, "Title")],
    )
    def test_headings(self, line, level, rest):
        """Heading level follows the longest matching prefix."""
        assert parse(line) == [Heading(level=level, children=[PlainText(text=rest)])]

    def test_hash_without_space_is_paragraph(self):
        """A hashtag is not a heading."""
        assert parse("#devlife") == [Paragraph(children=[PlainText(text="#devlife")])]

    def test_quote(self):
        """Quote prefix wraps the remainder."""
        assert parse("> wise words") == [
            Quote(children=[PlainText(text="wise words")])
        ]

    @pytest.mark.parametrize("marker", ["- ", "* "])
    def test_list_items(self, marker):
        """Both list markers produce flat list items."""
        assert parse(f"{marker}item") == [ListItem(children=[PlainText(text="item")])]

    def test_blank_line_is_line_break(self):
        """Exactly empty lines become line breaks."""
        assert parse("a\n\nb") == [
            Paragraph(children=[PlainText(text="a")]),
            LineBreak(),
            Paragraph(children=[PlainText(text="b")]),
        ]

    def test_whitespace_only_line_is_paragraph(self):
        """Only an exactly empty line counts as blank."""
        assert parse("   ") == [Paragraph(children=[PlainText(text="   ")])]

    def test_crlf_line_endings(self):
        """Windows line endings split like plain newlines."""
        assert parse("a\r\nb") == [
            Paragraph(children=[PlainText(text="a")]),
            Paragraph(children=[PlainText(text="b")]),
        ]

    def test_block_markers_mid_line_are_literal(self):
        """Block markers only count at the start of a line."""
        assert parse("a # b - c > d") == [
            Paragraph(children=[PlainText(text="a # b - c > d")])
        ]


class TestCodeBlocks:
    """Tests for fenced code blocks."""

    def test_fenced_code_block(self):
        """Fence with language becomes one code block."""
        assert parse("```js\nconst x = 1;\n```") == [
            CodeBlock(language="js", code="const x = 1;")
        ]

    def test_code_is_not_inline_parsed(self):
        """Markup inside code stays literal."""
        assert parse("```\n**not bold** @nobody\n```") == [
            CodeBlock(language="plaintext", code="**not bold** @nobody")
        ]

    def test_multiline_code_keeps_lines(self):
        """Lines are joined with newlines, blank lines included."""
        assert parse("```py\na = 1\n\nb = 2\n```") == [
            CodeBlock(language="py", code="a = 1\n\nb = 2")
        ]

    def test_unterminated_fence_runs_to_end(self):
        """A missing closing fence closes at end of input."""
        assert parse("```\nline one\nline two") == [
            CodeBlock(language="plaintext", code="line one\nline two")
        ]

    def test_lines_after_closing_fence_are_parsed(self):
        """Parsing resumes after the closing fence."""
        assert parse("```\ncode\n```\n# After") == [
            CodeBlock(language="plaintext", code="code"),
            Heading(level=1, children=[PlainText(text="After")]),
        ]


class TestInline:
    """Tests for inline span recognition."""

    def test_bold_runs_before_italic(self):
        """Double stars are bold, single stars italic."""
        assert parse("**bold** *italic*") == [
            Paragraph(
                children=[
                    Bold(children=[PlainText(text="bold")]),
                    PlainText(text=" "),
                    Italic(children=[PlainText(text="italic")]),
                ]
            )
        ]

    def test_inline_code(self):
        """Backticks wrap inline code."""
        assert parse_inline("run `make test` now") == [
            PlainText(text="run "),
            InlineCode(text="make test"),
            PlainText(text=" now"),
        ]

    def test_mention_followed_by_punctuation(self):
        """Mentions stop at the first non-word character."""
        assert parse_inline("hey @john_doe!") == [
            PlainText(text="hey "),
            Mention(username="john_doe"),
            PlainText(text="!"),
        ]

    def test_markdown_link(self):
        """Label and URL are captured."""
        assert parse_inline("see [docs](https://example.com/docs)") == [
            PlainText(text="see "),
            Link(label="docs", url="https://example.com/docs"),
        ]

    def test_bare_url(self):
        """Scheme, www and trailing slash are dropped from the display text."""
        assert parse_inline("visit https://www.example.com/") == [
            PlainText(text="visit "),
            BareUrl(url="https://www.example.com/", display_text="example.com"),
        ]

    def test_captured_text_is_not_rescanned(self):
        """Text inside an earlier node is not matched by later passes."""
        assert parse_inline("**@alice** `@bob`") == [
            Bold(children=[PlainText(text="@alice")]),
            PlainText(text=" "),
            InlineCode(text="@bob"),
        ]

    def test_unmatched_markers_stay_literal(self):
        """Unbalanced markup is left as plain text."""
        assert parse_inline("2 * 3 = 6 and `oops") == [
            PlainText(text="2 * 3 = 6 and `oops")
        ]

    def test_link_label_stops_at_open_bracket(self):
        """A stray bracket before a link stays literal."""
        assert parse_inline("[[docs](https://example.com)") == [
            PlainText(text="["),
            Link(label="docs", url="https://example.com"),
        ]

    def test_inline_inside_list_item(self):
        """Inline passes run on block remainders."""
        assert parse("- thanks @ana") == [
            ListItem(children=[PlainText(text="thanks "), Mention(username="ana")])
        ]


class TestDisplayUrl:
    """Tests for URL shortening."""

    def test_short_url_untouched_after_prefix_strip(self):
        """Short URLs only lose the scheme."""
        assert display_url("http://devnet.io/p/1") == "devnet.io/p/1"

    def test_long_url_is_truncated(self):
        """Over 40 characters: first 37 plus an ellipsis."""
        url = "https://example.com/" + "a" * 50

        display = display_url(url)

        assert display == ("example.com/" + "a" * 50)[:37] + "..."
        assert len(display) == 40

    def test_forty_characters_is_not_truncated(self):
        """Exactly 40 characters are shown in full."""
        path = "x" * 40
        assert display_url(f"https://{path}") == path


class TestExtractMentions:
    """Tests for mention extraction."""

    def test_distinct_in_order_of_appearance(self):
        """Repeated mentions are listed once."""
        assert extract_mentions("@bob and @alice\n> @bob again") == ["bob", "alice"]

    def test_ignores_code(self):
        """Mentions in code are not mentions."""
        assert extract_mentions("`@x`\n```\n@y\n```\n@z") == ["z"]


def _source(nodes: list[RenderNode]) -> str:
    """Rebuild the markup that produced a list of inline nodes."""
    parts = []
    for node in nodes:
        if isinstance(node, PlainText):
            parts.append(node.text)
        elif isinstance(node, Bold):
            parts.append(f"**{_source(node.children)}**")
        elif isinstance(node, Italic):
            parts.append(f"*{_source(node.children)}*")
        elif isinstance(node, InlineCode):
            parts.append(f"`{node.text}`")
        elif isinstance(node, Mention):
            parts.append(f"@{node.username}")
        elif isinstance(node, Link):
            parts.append(f"[{node.label}]({node.url})")
        elif isinstance(node, BareUrl):
            parts.append(node.url)
        else:
            raise AssertionError(f"unexpected inline node {node!r}")
    return "".join(parts)


class TestTextAccounting:
    """Every input character ends up in a node or in a consumed marker."""

    @pytest.mark.parametrize(
        "text",
        [
            "**unclosed bold",
            "[x](",
            "stray ` backtick",
            "@ alone and a trailing @",
            "2 * 3 ** 4",
            "***triple***",
            "[[nested](u)]",
            "mail me@example.com now",
            "[label](https://e.com) `code` @bob https://example.com/a, *it*",
            "`**not bold**` **`not code`**",
        ],
    )
    def test_inline_text_is_preserved(self, text):
        assert _source(parse_inline(text)) == text

    def test_paragraph_text_is_preserved(self):
        line = "see [x]( and ** then @ and `"
        (paragraph,) = parse(line)

        assert isinstance(paragraph, Paragraph)
        assert _source(paragraph.children) == line


class TestHostileInput:
    """Inputs that would make a backtracking pattern scan quadratically."""

    @pytest.mark.parametrize(
        "text",
        ["[" * 50000, "[a" * 25000, "*" * 50000, "a`" * 25000, "[a](" * 12500],
    )
    def test_parses_in_linear_time(self, text):
        started = time.perf_counter()
        nodes = parse(text)
        elapsed = time.perf_counter() - started

        assert elapsed < 1.0
        assert _source(nodes[0].children) == text

    def test_open_brackets_stay_literal(self):
        assert parse("[" * 50000) == [Paragraph(children=[PlainText(text="[" * 50000)])]
