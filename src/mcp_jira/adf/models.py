"""
Atlassian Document Format (ADF) models.

ADF is the JSON tree Jira Cloud uses for rich-text fields such as issue
descriptions and comment bodies. These models are deliberately permissive:
unknown node types, marks and attributes are accepted and carried through.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class NodeType(str, Enum):
    """Node types with a dedicated rendering rule."""

    DOC = "doc"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    TEXT = "text"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    CODE_BLOCK = "codeBlock"
    BLOCKQUOTE = "blockquote"
    RULE = "rule"
    TABLE = "table"
    TABLE_ROW = "tableRow"
    TABLE_CELL = "tableCell"
    TABLE_HEADER = "tableHeader"
    MEDIA_GROUP = "mediaGroup"
    MEDIA = "media"
    MENTION = "mention"
    HARD_BREAK = "hardBreak"
    EMOJI = "emoji"
    INLINE_CARD = "inlineCard"

    @classmethod
    def from_tag(cls, tag: str | None) -> "NodeType | None":
        try:
            return cls(tag)
        except ValueError:
            return None


class MarkType(str, Enum):
    STRONG = "strong"
    EM = "em"
    CODE = "code"
    STRIKE = "strike"
    UNDERLINE = "underline"
    LINK = "link"


class AdfMark(BaseModel):
    """Inline style annotation attached to a text node."""

    model_config = ConfigDict(extra="allow")

    type: str
    attrs: dict[str, Any] | None = None


class AdfNode(BaseModel):
    """A single node of an ADF tree."""

    model_config = ConfigDict(extra="allow")

    type: str = ""
    text: str | None = None
    content: list["AdfNode"] | None = None
    attrs: dict[str, Any] | None = None
    marks: list[AdfMark] | None = None

    @property
    def node_type(self) -> NodeType | None:
        return NodeType.from_tag(self.type)

    @property
    def children(self) -> list["AdfNode"]:
        return self.content or []

    def attr(self, name: str, default: Any = None) -> Any:
        if not self.attrs:
            return default
        return self.attrs.get(name, default)


class AdfDocument(BaseModel):
    """Root of an ADF tree, suitable as a Jira ``body`` or ``description``."""

    model_config = ConfigDict(extra="allow")

    version: int = 1
    type: Literal["doc"] = "doc"
    content: list[AdfNode] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize without unset optional keys, as Jira expects."""
        return self.model_dump(exclude_none=True)


def text_node(text: str, marks: list[AdfMark] | None = None) -> AdfNode:
    return AdfNode(type=NodeType.TEXT.value, text=text, marks=marks or None)


def paragraph(content: list[AdfNode] | None = None) -> AdfNode:
    return AdfNode(type=NodeType.PARAGRAPH.value, content=content or [])
