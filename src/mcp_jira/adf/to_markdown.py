"""Render Atlassian Document Format trees as Markdown."""

import json
import logging
from collections.abc import Mapping
from typing import Any

from .models import AdfDocument, AdfNode, MarkType, NodeType

logger = logging.getLogger("mcp-jira.adf")

CONVERSION_ERROR_TEXT = "*Error converting description format*"

_MARK_WRAPPERS: dict[str, tuple[str, str]] = {
    MarkType.STRONG.value: ("**", "**"),
    MarkType.EM.value: ("*", "*"),
    MarkType.CODE.value: ("`", "`"),
    MarkType.STRIKE.value: ("~~", "~~"),
    # Markdown has no underline
    MarkType.UNDERLINE.value: ("_", "_"),
}


def adf_to_markdown(adf: Any) -> str:
    """Convert an ADF document into Markdown.

    Accepts a JSON string, a mapping, or an :class:`AdfDocument`. Strings that
    are not JSON are returned unchanged. Documents without a ``content`` list
    render as an empty string. This function never raises; an internal failure
    yields a fixed placeholder so that a formatting problem never hides an
    otherwise successful fetch.

    Args:
        adf: The document to convert.

    Returns:
        Markdown with top-level blocks separated by a blank line.
    """
    try:
        if not adf:
            return ""

        if isinstance(adf, str):
            try:
                document = json.loads(adf)
            except ValueError:
                return adf
        elif isinstance(adf, AdfDocument):
            document = adf.model_dump(exclude_none=True)
        elif isinstance(adf, Mapping):
            document = adf
        else:
            return str(adf)

        if not isinstance(document, Mapping):
            return ""
        content = document.get("content")
        if not isinstance(content, list):
            return ""

        nodes = [AdfNode.model_validate(node) for node in content]
        markdown = _render_blocks(nodes)
        logger.debug(f"Converted ADF to Markdown, length: {len(markdown)}")
        return markdown
    except Exception as e:
        logger.error(f"Error converting ADF to Markdown: {e}", exc_info=True)
        return CONVERSION_ERROR_TEXT


def _render_blocks(nodes: list[AdfNode], separator: str = "\n\n") -> str:
    return separator.join(_render_node(node) for node in nodes)


def _render_inline(nodes: list[AdfNode]) -> str:
    return "".join(_render_node(node) for node in nodes)


def _render_node(node: AdfNode) -> str:
    match node.node_type:
        case NodeType.PARAGRAPH:
            return _render_paragraph(node)
        case NodeType.HEADING:
            return _render_heading(node)
        case NodeType.BULLET_LIST:
            return "\n".join(_render_node(item) for item in node.children)
        case NodeType.ORDERED_LIST:
            return _render_ordered_list(node)
        case NodeType.LIST_ITEM:
            return _render_list_item(node)
        case NodeType.CODE_BLOCK:
            return _render_code_block(node)
        case NodeType.BLOCKQUOTE:
            return _render_blockquote(node)
        case NodeType.RULE:
            return "---"
        case NodeType.MEDIA_GROUP:
            return _render_media_group(node)
        case NodeType.TABLE:
            return _render_table(node)
        case NodeType.TEXT:
            return _render_text(node)
        case NodeType.MENTION:
            return _render_mention(node)
        case NodeType.HARD_BREAK:
            return "\n"
        case NodeType.EMOJI:
            return str(node.attr("text") or node.attr("shortName") or "")
        case NodeType.INLINE_CARD:
            url = node.attr("url")
            return f"[{url}]({url})" if url else ""
        case _:
            # Unknown nodes are transparent containers
            if node.content is not None:
                return _render_blocks(node.content)
            return ""


def _render_paragraph(node: AdfNode) -> str:
    if node.content is None:
        return ""

    parts: list[str] = []
    previous: AdfNode | None = None
    for child in node.content:
        if (
            previous is not None
            and child.type == NodeType.TEXT.value
            and previous.type == NodeType.TEXT.value
            and not (child.text or "").startswith(" ")
            and not (previous.text or "").endswith(" ")
        ):
            parts.append(" ")
        parts.append(_render_node(child))
        previous = child
    return "".join(parts)


def _render_heading(node: AdfNode) -> str:
    if node.content is None or node.attrs is None:
        return ""

    level = node.attr("level")
    if not isinstance(level, int) or isinstance(level, bool):
        level = 1
    return f"{'#' * level} {_render_inline(node.content)}"


def _render_ordered_list(node: AdfNode) -> str:
    lines = []
    for index, item in enumerate(node.children, start=1):
        rendered = _render_node(item)
        if rendered.startswith("- "):
            rendered = f"{index}. {rendered[2:]}"
        lines.append(rendered)
    return "\n".join(lines)


def _render_list_item(node: AdfNode) -> str:
    if node.content is None:
        return ""

    parts = []
    for child in node.content:
        rendered = _render_node(child)
        if child.node_type in (NodeType.BULLET_LIST, NodeType.ORDERED_LIST):
            rendered = "\n".join(f"  {line}" for line in rendered.split("\n"))
        parts.append(rendered)
    return "- " + "\n".join(parts)


def _render_code_block(node: AdfNode) -> str:
    if node.content is None:
        return "```\n```"

    language = node.attr("language") or ""
    return f"```{language}\n{_render_inline(node.content)}\n```"


def _render_blockquote(node: AdfNode) -> str:
    if node.content is None:
        return ""

    body = _render_blocks(node.content)
    return "\n".join(f"> {line}" for line in body.split("\n"))


def _render_media_group(node: AdfNode) -> str:
    entries = []
    for media in node.children:
        if media.node_type is not NodeType.MEDIA or not media.attrs:
            continue
        match media.attr("type"):
            case "file":
                entries.append(f"[Attachment: {media.attr('id')}]")
            case "link":
                entries.append("[External Link]")
    return "\n".join(entries)


def _render_table(node: AdfNode) -> str:
    rows: list[list[str]] = []
    for row in node.children:
        if row.node_type is not NodeType.TABLE_ROW:
            continue
        cells = [
            _render_inline(cell.content).strip()
            for cell in row.children
            if cell.node_type in (NodeType.TABLE_CELL, NodeType.TABLE_HEADER)
            and cell.content is not None
        ]
        if cells:
            rows.append(cells)

    if not rows:
        return ""

    width = max(len(row) for row in rows)
    rows = [row + [""] * (width - len(row)) for row in rows]
    lines = [" | ".join(rows[0]), " | ".join(["---"] * width)]
    lines.extend(" | ".join(row) for row in rows[1:])
    return "\n".join(lines)


def _render_text(node: AdfNode) -> str:
    if not node.text:
        return ""

    text = node.text
    link_href = None
    for mark in node.marks or []:
        if mark.type == MarkType.LINK.value:
            if link_href is None and mark.attrs:
                link_href = mark.attrs.get("href")
            continue
        wrapper = _MARK_WRAPPERS.get(mark.type)
        if wrapper:
            text = f"{wrapper[0]}{text}{wrapper[1]}"

    # Links wrap the already decorated text
    if link_href:
        text = f"[{text}]({link_href})"
    return text


def _render_mention(node: AdfNode) -> str:
    name = node.attr("text") or node.attr("displayName") or ""
    if not name:
        return ""
    name = str(name)
    if name.startswith("@"):
        name = name[1:]
    return f"@{name}"
