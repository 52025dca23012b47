from __future__ import annotations

from dataclasses import dataclass, field

from lxml import etree

from .builder import build_content, element_tag
from .content import Content
from .display import RECURSIVE_TAGS


@dataclass
class IterContext:
    """Accumulator for one article walk.

    ``count`` is keyed by tag name and shared by every nesting level, so a
    nested expression continues the article's expression numbering.
    ``ignored`` collects the names of elements outside the vocabulary.
    """

    stack: list[Content] = field(default_factory=list)
    count: dict[str, int] = field(default_factory=dict)
    ignored: list[str] = field(default_factory=list)


def push(node: etree._Element, ctx: IterContext, article_index: int) -> None:
    content = build_content(node, ctx, article_index)
    if content is None:
        if isinstance(node.tag, str):
            ctx.ignored.append(etree.QName(node).localname)
        return
    ctx.stack.append(content)
    if element_tag(node) in RECURSIVE_TAGS:
        for child in node.iterchildren():
            push(child, ctx, article_index)


def walk_article(article: etree._Element, article_index: int) -> IterContext:
    ctx = IterContext()
    for child in article.iterchildren():
        push(child, ctx, article_index)
    return ctx
