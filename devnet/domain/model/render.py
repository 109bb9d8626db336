"""Render nodes produced by the markup parser.

A closed set of variants discriminated by ``kind``. Renderers (the web
frontend, or anything consuming the JSON) switch on ``kind`` exhaustively.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from devnet.domain.model.common import DomainModel


class PlainText(DomainModel):
    kind: Literal["text"] = "text"
    text: str


class Heading(DomainModel):
    kind: Literal["heading"] = "heading"
    level: Literal[1, 2, 3]
    children: list["RenderNode"] = Field(default_factory=list)


class Quote(DomainModel):
    kind: Literal["quote"] = "quote"
    children: list["RenderNode"] = Field(default_factory=list)


class ListItem(DomainModel):
    kind: Literal["list_item"] = "list_item"
    children: list["RenderNode"] = Field(default_factory=list)


class CodeBlock(DomainModel):
    kind: Literal["code_block"] = "code_block"
    language: str = "plaintext"
    code: str


class LineBreak(DomainModel):
    kind: Literal["line_break"] = "line_break"


class Paragraph(DomainModel):
    kind: Literal["paragraph"] = "paragraph"
    children: list["RenderNode"] = Field(default_factory=list)


class Bold(DomainModel):
    kind: Literal["bold"] = "bold"
    children: list["RenderNode"] = Field(default_factory=list)


class Italic(DomainModel):
    kind: Literal["italic"] = "italic"
    children: list["RenderNode"] = Field(default_factory=list)


class InlineCode(DomainModel):
    kind: Literal["inline_code"] = "inline_code"
    text: str


class Mention(DomainModel):
    kind: Literal["mention"] = "mention"
    username: str


class Link(DomainModel):
    kind: Literal["link"] = "link"
    label: str
    url: str


class BareUrl(DomainModel):
    kind: Literal["bare_url"] = "bare_url"
    url: str
    display_text: str


RenderNode = Annotated[
    Union[
        PlainText,
        Heading,
        Quote,
        ListItem,
        CodeBlock,
        LineBreak,
        Paragraph,
        Bold,
        Italic,
        InlineCode,
        Mention,
        Link,
        BareUrl,
    ],
    Field(discriminator="kind"),
]

# Containers reference RenderNode before it exists
for _container in (Heading, Quote, ListItem, Paragraph, Bold, Italic):
    _container.model_rebuild()
