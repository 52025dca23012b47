from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Mapping

from lxml import etree

from . import config
from .attributes import from_attributes
from .content import (
    Content,
    InputForm,
    InputText,
    LocalDefinition,
    OutputDiagram,
    OutputTable,
    OutputText,
    PlainText,
)
from .display import Tag

if TYPE_CHECKING:
    from .walker import IterContext

_Builder = Callable[[etree._Element, str], Content]


def element_tag(node: object) -> Tag | None:
    """Map a tree node to its vocabulary tag, or ``None`` to ignore it."""
    if not isinstance(node, etree._Element) or not isinstance(node.tag, str):
        return None
    return Tag.from_name(etree.QName(node).localname)


def build_content(
    node: etree._Element,
    ctx: IterContext,
    article_index: int,
) -> Content | None:
    tag = element_tag(node)
    if tag is None:
        return None
    count = ctx.count.get(tag.value, 0) + 1
    ctx.count[tag.value] = count
    return _BUILDERS[tag](node, f"{article_index}.{count}")


def _text_content(node: etree._Element) -> str:
    return "".join(node.itertext()).strip()


def _parent_attrs(node: etree._Element) -> Mapping[str, str] | None:
    parent = node.getparent()
    if parent is None:
        return None
    return parent.attrib


def _paragraph(node: etree._Element, display_id: str) -> Content:
    return PlainText(display_id=display_id, value=_text_content(node))


def _expression(node: etree._Element, display_id: str) -> Content:
    attrs = node.attrib
    return InputText(
        display_id=display_id,
        value=from_attributes("value", attrs),
        rel=from_attributes("rel", attrs),
        ref=from_attributes("name", attrs),
        type=from_attributes("type", attrs),
    )


def _definition(node: etree._Element, display_id: str) -> Content:
    attrs = node.attrib
    return LocalDefinition(
        display_id=display_id,
        value=_text_content(node) or from_attributes("value", attrs),
        scope=config.LOCAL_DEFINITION_SCOPE,
        ref=from_attributes("name", attrs),
        type=from_attributes("type", attrs),
    )


def _scenario(node: etree._Element, display_id: str) -> Content:
    attrs = node.attrib
    return InputForm(
        display_id=display_id,
        value=from_attributes("value", attrs),
        type=from_attributes("type", attrs),
    )


def _statement(node: etree._Element, display_id: str) -> Content:
    attrs = node.attrib
    return OutputText(
        display_id=display_id,
        value=_text_content(node) or from_attributes("value", attrs),
        action=from_attributes("action", attrs),
    )


def _table(node: etree._Element, display_id: str) -> Content:
    attrs = node.attrib
    return OutputTable(
        display_id=display_id,
        value=from_attributes("value", attrs, _parent_attrs(node)),
        max=from_attributes("max", attrs),
        cols=from_attributes("cols", attrs),
        sort=from_attributes("sort", attrs),
        fold=from_attributes("fold", attrs),
    )


def _diagram(node: etree._Element, display_id: str) -> Content:
    attrs = node.attrib
    return OutputDiagram(
        display_id=display_id,
        value=from_attributes("value", attrs, _parent_attrs(node)),
        x=from_attributes("x", attrs),
        y=from_attributes("y", attrs),
        id=from_attributes("id", attrs),
        max=from_attributes("max", attrs),
        fold=from_attributes("fold", attrs),
        type=from_attributes("type", attrs),
    )


_BUILDERS: dict[Tag, _Builder] = {
    Tag.PARAGRAPH: _paragraph,
    Tag.EXPRESSION: _expression,
    Tag.DEFINITION: _definition,
    Tag.SCENARIO: _scenario,
    Tag.STATEMENT: _statement,
    Tag.TABLE: _table,
    Tag.DIAGRAM: _diagram,
}
