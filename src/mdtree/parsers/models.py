# src/mdtree/parsers/models.py

"""Document tree produced by the Markdown parser.

Every node is a frozen pydantic model. Child sequences are tuples, so a parsed
tree is immutable and no node can be shared by two parents through a mutable
container. Block elements form a discriminated union on their ``type`` field,
which is also what the JSON export carries.
"""

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class TextStyle(str, Enum):
    """Inline style shared by every character of a span."""

    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"

    @classmethod
    def from_flags(cls, *, bold: bool, italic: bool) -> "TextStyle":
        if bold and italic:
            return cls.BOLD_ITALIC
        if bold:
            return cls.BOLD
        if italic:
            return cls.ITALIC
        return cls.PLAIN


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TextSpan(_Node):
    """Run of text sharing one style. Never empty."""

    text: str = Field(min_length=1)
    style: TextStyle = TextStyle.PLAIN


class Header(_Node):
    type: Literal["header"] = "header"
    level: int = Field(ge=1, le=6)
    text: tuple[TextSpan, ...] = ()


class Paragraph(_Node):
    type: Literal["paragraph"] = "paragraph"
    text: tuple[TextSpan, ...] = ()


class ListItem(_Node):
    """One list entry.

    ``content[0]`` is the paragraph from the marker line when that line had
    text after the marker; the rest are blocks nested under the item.
    """

    content: tuple["BlockElement", ...] = ()


class ListBlock(_Node):
    type: Literal["list"] = "list"
    items: tuple[ListItem, ...] = Field(min_length=1)
    ordered: bool = False


class Divider(_Node):
    type: Literal["divider"] = "divider"


BlockElement = Annotated[
    Union[Header, Paragraph, ListBlock, Divider],
    Field(discriminator="type"),
]

ListItem.model_rebuild()
ListBlock.model_rebuild()

_DOCUMENT_ADAPTER: TypeAdapter[list[BlockElement]] = TypeAdapter(list[BlockElement])
_BLOCK_ADAPTER: TypeAdapter[BlockElement] = TypeAdapter(BlockElement)


def plain_text(spans: Iterable[TextSpan]) -> str:
    """Concatenate span texts, dropping style information."""
    return "".join(span.text for span in spans)


def dump_document(blocks: Sequence[BlockElement]) -> list[dict[str, Any]]:
    """Export a parsed document as JSON-compatible data.

    Lists and items are assembled bottom-up from an explicit work list, so
    nesting depth is not limited by the interpreter or serializer stack.
    """
    nodes: list[Any] = []
    pending: list[Any] = list(blocks)
    while pending:
        node = pending.pop()
        nodes.append(node)
        if isinstance(node, ListBlock):
            pending.extend(node.items)
        elif isinstance(node, ListItem):
            pending.extend(node.content)

    # Children always follow their parent in ``nodes``
    dumped: dict[int, dict[str, Any]] = {}
    for node in reversed(nodes):
        if isinstance(node, ListBlock):
            dumped[id(node)] = {
                "type": node.type,
                "items": [dumped[id(item)] for item in node.items],
                "ordered": node.ordered,
            }
        elif isinstance(node, ListItem):
            dumped[id(node)] = {"content": [dumped[id(child)] for child in node.content]}
        else:
            dumped[id(node)] = node.model_dump(mode="json")
    return [dumped[id(block)] for block in blocks]


def load_document(data: Any) -> list[BlockElement]:
    """Validate exported data back into a document tree.

    Each node is validated on its own, with already-built children in place
    of their raw data, so arbitrarily deep documents load without recursion.

    Raises:
        pydantic.ValidationError: If ``data`` is not a well-formed document.
    """
    if not isinstance(data, list):
        return _DOCUMENT_ADAPTER.validate_python(data)

    nodes: list[tuple[bool, Any]] = []
    pending: list[tuple[bool, Any]] = [(False, block) for block in data]
    while pending:
        is_item, raw = pending.pop()
        nodes.append((is_item, raw))
        children = _raw_children(is_item, raw)
        if children is not None:
            pending.extend((not is_item, child) for child in children)

    built: dict[tuple[bool, int], Any] = {}
    for is_item, raw in reversed(nodes):
        children = _raw_children(is_item, raw)
        if is_item:
            if children is None:
                node: Any = ListItem.model_validate(raw)
            else:
                content = [built[(False, id(child))] for child in children]
                node = ListItem.model_validate({**raw, "content": content})
        elif children is None:
            node = _BLOCK_ADAPTER.validate_python(raw)
        else:
            items = [built[(True, id(child))] for child in children]
            node = ListBlock.model_validate({**raw, "items": items})
        built[(is_item, id(raw))] = node
    return [built[(False, id(block))] for block in data]


def _raw_children(is_item: bool, raw: Any) -> list[Any] | None:
    """Nested raw nodes of a list item or list block, if ``raw`` has any."""
    if not isinstance(raw, dict):
        return None
    if is_item:
        children = raw.get("content")
    elif raw.get("type") == "list":
        children = raw.get("items")
    else:
        return None
    return children if isinstance(children, list) else None
