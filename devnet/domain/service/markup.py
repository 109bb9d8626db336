"""Lightweight markup parser for user content.

Posts, project details, comments and bios use a small markdown dialect.
``parse`` turns such text into a list of render nodes in two phases:

1. Block segmentation, line by line. Fenced code blocks consume lines until
   the closing fence; every other line is a heading, quote, list item, line
   break or paragraph depending on its prefix.
2. Inline recognition on the remainder of non-code lines. A fixed sequence
   of regex passes rewrites the plain-string fragments of the line; nodes
   produced by an earlier pass are never rescanned.

The parser never raises. Text that matches no rule is kept as plain text.
"""

import re
from collections.abc import Callable, Iterable, Sequence
from typing import Union

from devnet.domain.model.render import (
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

CODE_FENCE = "```"
DEFAULT_CODE_LANGUAGE = "plaintext"

URL_DISPLAY_LIMIT = 40
URL_DISPLAY_KEEP = 37

# Longest prefix first so "### " is not read as "# " + "## "
_HEADING_PREFIXES = (("### ", 3), ("## ", 2), ("# ", 1))
_QUOTE_PREFIX = "> "
_LIST_PREFIXES = ("- ", "* ")

_BOLD = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC = re.compile(r"\*([^*]+)\*")
_INLINE_CODE = re.compile(r"`([^`]+)`")
_MENTION = re.compile(r"@([A-Za-z0-9_]+)")
_LINK = re.compile(r"\[([^\[\]]+)\]\(([^()\s]+)\)")
_BARE_URL = re.compile(r"https?://\S+")
_URL_PREFIX = re.compile(r"^https?://(?:www\.)?")

Fragment = Union[str, RenderNode]


def parse(text: str) -> list[RenderNode]:
    """Parse markup text into render nodes.

    Args:
        text: Raw user content

    Returns:
        One node per line, except fenced code blocks which collapse into a
        single ``CodeBlock``. Empty input gives an empty list.
    """
    if not text:
        return []

    lines = text.replace("\r\n", "\n").split("\n")
    nodes: list[RenderNode] = []

    i = 0
    while i < len(lines):
        line = lines[i]

        if line.startswith(CODE_FENCE):
            language = line[len(CODE_FENCE) :].strip() or DEFAULT_CODE_LANGUAGE
            i += 1
            code_lines: list[str] = []
            # An unterminated fence runs to the end of the input
            while i < len(lines) and not lines[i].startswith(CODE_FENCE):
                code_lines.append(lines[i])
                i += 1
            i += 1  # closing fence
            nodes.append(CodeBlock(language=language, code="\n".join(code_lines)))
            continue

        nodes.append(_parse_line(line))
        i += 1

    return nodes


def parse_inline(text: str) -> list[RenderNode]:
    """Run the inline passes over a single line of text."""
    fragments: list[Fragment] = [text] if text else []
    for pattern, build in _INLINE_PASSES:
        fragments = _rewrite(fragments, pattern, build)
    return [PlainText(text=f) if isinstance(f, str) else f for f in fragments]


def display_url(url: str) -> str:
    """Shorten a URL for display.

    Drops the scheme, a leading ``www.`` and one trailing slash, then
    truncates to 37 characters plus an ellipsis when over 40 characters.
    """
    display = _URL_PREFIX.sub("", url)
    if display.endswith("/"):
        display = display[:-1]
    if len(display) > URL_DISPLAY_LIMIT:
        display = display[:URL_DISPLAY_KEEP] + "..."
    return display


def extract_mentions(text: str) -> list[str]:
    """Distinct usernames mentioned in text, in order of first appearance.

    Mentions inside code blocks and inline code are not counted.
    """
    return collect_mentions(parse(text))


def collect_mentions(nodes: Iterable[RenderNode]) -> list[str]:
    """Distinct usernames of the Mention nodes in an already parsed tree."""
    seen: dict[str, None] = {}
    for username in _walk_mentions(nodes):
        seen.setdefault(username, None)
    return list(seen)


def _parse_line(line: str) -> RenderNode:
    for prefix, level in _HEADING_PREFIXES:
        if line.startswith(prefix):
            return Heading(level=level, children=parse_inline(line[len(prefix) :]))

    if line.startswith(_QUOTE_PREFIX):
        return Quote(children=parse_inline(line[len(_QUOTE_PREFIX) :]))

    for prefix in _LIST_PREFIXES:
        if line.startswith(prefix):
            return ListItem(children=parse_inline(line[len(prefix) :]))

    if line == "":
        return LineBreak()

    return Paragraph(children=parse_inline(line))


def _rewrite(
    fragments: Sequence[Fragment],
    pattern: re.Pattern[str],
    build: Callable[[re.Match[str]], RenderNode],
) -> list[Fragment]:
    """Split every string fragment on ``pattern`` matches.

    Non-string fragments pass through untouched.
    """
    result: list[Fragment] = []
    for fragment in fragments:
        if not isinstance(fragment, str):
            result.append(fragment)
            continue

        position = 0
        for match in pattern.finditer(fragment):
            if match.start() > position:
                result.append(fragment[position : match.start()])
            result.append(build(match))
            position = match.end()
        if position < len(fragment):
            result.append(fragment[position:])

    return result


def _walk_mentions(nodes: Iterable[RenderNode]) -> Iterable[str]:
    for node in nodes:
        if isinstance(node, Mention):
            yield node.username
        children = getattr(node, "children", None)
        if children:
            yield from _walk_mentions(children)


# Order matters: bold before italic since "**" also matches "*"
_INLINE_PASSES: tuple[
    tuple[re.Pattern[str], Callable[[re.Match[str]], RenderNode]], ...
] = (
    (_BOLD, lambda m: Bold(children=[PlainText(text=m.group(1))])),
    (_ITALIC, lambda m: Italic(children=[PlainText(text=m.group(1))])),
    (_INLINE_CODE, lambda m: InlineCode(text=m.group(1))),
    (_MENTION, lambda m: Mention(username=m.group(1))),
    (_LINK, lambda m: Link(label=m.group(1), url=m.group(2))),
    (_BARE_URL, lambda m: BareUrl(url=m.group(0), display_text=display_url(m.group(0)))),
)
