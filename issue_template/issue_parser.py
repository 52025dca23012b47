from __future__ import annotations

from datetime import datetime
from pathlib import Path
from time import perf_counter
from typing import Callable, Iterable

from lxml import etree

from . import config, parse_log
from .analyzer import analyze_document
from .attributes import from_attributes
from .content import Article, Issue, Terminology
from .parse_log import ParseLogState


def assemble_issue(
    root: etree._Element,
    articles: Iterable[Article],
    terminology: Iterable[Terminology],
) -> Issue:
    attrs = root.attrib
    language, currency, version = (
        from_attributes(key, attrs) for key in config.ROOT_METADATA_KEYS
    )
    return Issue(
        articles=tuple(articles),
        terminology=tuple(terminology),
        language=language,
        currency=currency,
        version=version,
    )


def parse_tree(
    document: etree._ElementTree | etree._Element,
    log_state: ParseLogState | None = None,
) -> Issue:
    """Build an :class:`Issue` from an already parsed template tree.

    No I/O happens here; the same tree always yields the same issue.
    """
    root = _root_element(document)
    articles, terminology = analyze_document(root, log_state=log_state)
    return assemble_issue(root, articles, terminology)


class IssueParser:
    def __init__(
        self,
        write_log: bool = True,
        log_retention_days: int = config.DEFAULT_LOG_RETENTION_DAYS,
    ) -> None:
        self.write_log = write_log
        self.log_retention_days = log_retention_days
        self._log_state: ParseLogState | None = None
        self.last_log_state: ParseLogState | None = None

    def parse(self, template_path: str | Path) -> Issue:
        path = Path(template_path)
        return self._run(str(path), lambda: _read_template_file(path))

    def parse_string(self, markup: str | bytes) -> Issue:
        return self._run("<string>", lambda: _read_template_markup(markup))

    def _run(self, source: str, load: Callable[[], etree._Element]) -> Issue:
        started = perf_counter()
        self._log_state = ParseLogState(source=source, start_time=datetime.now())
        try:
            root = load()
            issue = parse_tree(root, log_state=self._log_state)
        except Exception as exc:
            self._log_state.error = str(exc)
            self._finish(started)
            raise
        _record_missing_metadata(self._log_state, issue)
        self._finish(started)
        return issue

    def _finish(self, started: float) -> None:
        log_state = self._log_state
        if log_state is None:
            return
        log_state.elapsed_sec = perf_counter() - started
        if self.write_log:
            config.cleanup_logs(self.log_retention_days)
            parse_log.write_log(log_state)
        self.last_log_state = log_state
        self._log_state = None


def parse(markup: str | bytes) -> Issue:
    return IssueParser(write_log=False).parse_string(markup)


def _root_element(document: etree._ElementTree | etree._Element) -> etree._Element:
    if isinstance(document, etree._ElementTree):
        return document.getroot()
    return document


def _xml_parser(encoding: str | None = None) -> etree.XMLParser:
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities="internal",
        no_network=True,
    )


def _read_template_markup(markup: str | bytes) -> etree._Element:
    # str input is re-encoded here, so any encoding in its declaration is stale
    encoding = "utf-8" if isinstance(markup, str) else None
    data = markup.encode(encoding) if encoding else markup
    data = data.strip()
    if not data:
        raise ValueError("template markup is empty")
    try:
        return etree.fromstring(data, parser=_xml_parser(encoding))
    except etree.XMLSyntaxError as exc:
        raise ValueError(f"invalid template markup: {exc}") from exc


def _read_template_file(path: Path) -> etree._Element:
    if not path.exists():
        raise FileNotFoundError(f"issue template not found: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"issue template path is a directory: {path}")
    try:
        data = path.read_bytes()
    except PermissionError as exc:
        raise PermissionError(f"issue template is not readable: {path}") from exc
    return _read_template_markup(data)


def _record_missing_metadata(log_state: ParseLogState, issue: Issue) -> None:
    for key in config.ROOT_METADATA_KEYS:
        if getattr(issue, key) is None:
            log_state.warn(
                rule="missing_metadata",
                reason=f"root attribute {key!r} is absent",
            )
