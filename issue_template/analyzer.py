from __future__ import annotations

from typing import Iterable

from lxml import etree

from . import config
from .attributes import from_attributes
from .content import Article, Content, Terminology
from .parse_log import ParseLogState
from .walker import walk_article


def iter_articles(
    root: etree._Element,
    log_state: ParseLogState | None = None,
) -> Iterable[Article]:
    for index, article in enumerate(root.iter(config.ARTICLE_TAG), start=1):
        title = from_attributes(config.ARTICLE_TITLE_KEY, article.attrib)
        ctx = walk_article(article, index)
        content = tuple(item for item in ctx.stack if item.value)
        if log_state is not None:
            _record_article(log_state, index, ctx.stack, ctx.ignored)
            log_state.content_counts[index] = len(content)
        yield Article(title=title, content=content)


def iter_terminology(root: etree._Element) -> Iterable[Terminology]:
    for definition in root.iter(config.DEFINITION_TAG):
        attrs = definition.attrib
        yield Terminology(
            name=from_attributes("name", attrs),
            value=from_attributes("value", attrs),
        )


def analyze_document(
    root: etree._Element,
    log_state: ParseLogState | None = None,
) -> tuple[tuple[Article, ...], tuple[Terminology, ...]]:
    articles = tuple(iter_articles(root, log_state=log_state))
    terminology = tuple(iter_terminology(root))
    if log_state is not None:
        log_state.article_count = len(articles)
        log_state.terminology_count = len(terminology)
    return articles, terminology


def _record_article(
    log_state: ParseLogState,
    index: int,
    stack: Iterable[Content],
    ignored: Iterable[str],
) -> None:
    for name in ignored:
        log_state.warn(
            rule="unknown_tag",
            reason="element outside the template vocabulary",
            tag=name,
            article_index=index,
        )
    for item in stack:
        if item.value:
            continue
        log_state.warn(
            rule="empty_value",
            reason="content dropped without a value",
            display_id=item.display_id,
            article_index=index,
        )
