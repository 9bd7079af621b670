"""
Convert a constrained Markdown subset into Atlassian Document Format.

Block constructs: ATX headings, horizontal rules, single-line blockquotes,
bullet lists and numbered lists. Inline constructs: links, bold, italic,
inline code and strikethrough.

Inline patterns compete by position: the match starting leftmost wins, and
patterns that start at the same index are tried in the order link, bold,
italic, code, strikethrough. Scanning resumes after each consumed match, so
markup nested inside bold, italic, strikethrough or link text is parsed
recursively while code spans stay literal.
"""

import logging
import re

from .models import AdfDocument, AdfMark, AdfNode, MarkType, NodeType, paragraph, text_node

logger = logging.getLogger("mcp-jira.adf")

MAX_HEADING_LEVEL = 6

_HEADING_RE = re.compile(r"^(#+)\s+(.+)$")
_RULE_RE = re.compile(r"^(?:\*\*\*|---|_{3,})$")
_BULLET_RE = re.compile(r"^[-*] (.*)$")
_ORDERED_RE = re.compile(r"^\d+\. (.*)$")

# (pattern, mark, recurse into inner text)
_INLINE_PATTERNS: list[tuple[re.Pattern[str], MarkType, bool]] = [
    (re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)"), MarkType.LINK, True),
    (re.compile(r"\*\*(.+?)\*\*"), MarkType.STRONG, True),
    (re.compile(r"\*([^*]+)\*"), MarkType.EM, True),
    (re.compile(r"`([^`]+)`"), MarkType.CODE, False),
    (re.compile(r"~~(.+?)~~"), MarkType.STRIKE, True),
]


def text_to_adf(text: str | None) -> AdfDocument:
    """Wrap each non-blank line of plain text in its own paragraph."""
    lines = [line for line in (text or "").split("\n") if line.strip()]
    if not lines:
        return AdfDocument(content=[paragraph()])
    return AdfDocument(content=[paragraph([text_node(line)]) for line in lines])


def markdown_to_adf(markdown: str | None) -> AdfDocument:
    """Convert Markdown into an ADF document.

    Never raises: if parsing fails the input is converted with
    :func:`text_to_adf` instead.

    Args:
        markdown: Markdown text.

    Returns:
        A document that always holds at least one block.
    """
    try:
        blocks = _parse_blocks((markdown or "").split("\n"))
        if not blocks:
            blocks = [paragraph()]
        document = AdfDocument(content=blocks)
        logger.debug(f"Converted Markdown to ADF with {len(blocks)} blocks")
        return document
    except Exception as e:
        logger.error(f"Error converting Markdown to ADF: {e}", exc_info=True)
        return text_to_adf(markdown)


def _parse_blocks(lines: list[str]) -> list[AdfNode]:
    blocks: list[AdfNode] = []
    index = 0
    while index < len(lines):
        line = lines[index].rstrip("\r")
        stripped = line.strip()

        if not stripped:
            index += 1
            continue

        if heading := _HEADING_RE.match(stripped):
            level = min(len(heading.group(1)), MAX_HEADING_LEVEL)
            blocks.append(
                AdfNode(
                    type=NodeType.HEADING.value,
                    attrs={"level": level},
                    content=parse_markdown_text(heading.group(2).strip()),
                )
            )
        elif _RULE_RE.match(stripped):
            blocks.append(AdfNode(type=NodeType.RULE.value))
        elif stripped.startswith(">"):
            quoted = stripped[1:].lstrip()
            blocks.append(
                AdfNode(
                    type=NodeType.BLOCKQUOTE.value,
                    content=[paragraph(parse_markdown_text(quoted))],
                )
            )
        elif _BULLET_RE.match(stripped) or _ORDERED_RE.match(stripped):
            pattern = _BULLET_RE if _BULLET_RE.match(stripped) else _ORDERED_RE
            list_type = (
                NodeType.BULLET_LIST if pattern is _BULLET_RE else NodeType.ORDERED_LIST
            )
            items = []
            while index < len(lines):
                item = pattern.match(lines[index].rstrip("\r").strip())
                if not item:
                    break
                items.append(
                    AdfNode(
                        type=NodeType.LIST_ITEM.value,
                        content=[paragraph(parse_markdown_text(item.group(1)))],
                    )
                )
                index += 1
            blocks.append(AdfNode(type=list_type.value, content=items))
            continue
        else:
            blocks.append(paragraph(parse_markdown_text(line)))

        index += 1
    return blocks


def parse_markdown_text(text: str) -> list[AdfNode]:
    """Parse inline Markdown into a list of ADF text nodes."""
    nodes: list[AdfNode] = []
    cursor = 0
    while cursor < len(text):
        best: tuple[re.Match[str], MarkType, bool] | None = None
        for pattern, mark, recurse in _INLINE_PATTERNS:
            match = pattern.search(text, cursor)
            if match and (best is None or match.start() < best[0].start()):
                best = (match, mark, recurse)

        if best is None:
            nodes.append(text_node(text[cursor:]))
            break

        match, mark, recurse = best
        if match.start() > cursor:
            nodes.append(text_node(text[cursor : match.start()]))
        nodes.extend(_marked_nodes(match, mark, recurse))
        cursor = match.end()
    return nodes


def _marked_nodes(match: re.Match[str], mark: MarkType, recurse: bool) -> list[AdfNode]:
    inner = match.group(1)
    if mark is MarkType.LINK:
        outer = AdfMark(type=mark.value, attrs={"href": match.group(2)})
    else:
        outer = AdfMark(type=mark.value)

    if not recurse:
        return [text_node(inner, [outer])]

    children = parse_markdown_text(inner)
    for child in children:
        child.marks = [*(child.marks or []), outer]
    return children
