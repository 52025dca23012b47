from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from . import config


@dataclass
class WarningEntry:
    rule: str
    reason: str
    tag: str | None = None
    display_id: str | None = None
    article_index: int | None = None


@dataclass
class ParseLogState:
    source: str
    start_time: datetime
    warnings: list[WarningEntry] = field(default_factory=list)
    content_counts: dict[int, int] = field(default_factory=dict)
    article_count: int = 0
    terminology_count: int = 0
    error: str | None = None
    elapsed_sec: float | None = None

    def warn(
        self,
        rule: str,
        reason: str,
        tag: str | None = None,
        display_id: str | None = None,
        article_index: int | None = None,
    ) -> None:
        self.warnings.append(
            WarningEntry(
                rule=rule,
                reason=reason,
                tag=tag,
                display_id=display_id,
                article_index=article_index,
            )
        )


def format_log(log_state: ParseLogState) -> str:
    lines = [
        f"source: {log_state.source}",
        f"elapsed_sec: {log_state.elapsed_sec:.3f}"
        if log_state.elapsed_sec is not None
        else "elapsed_sec: unknown",
        f"article_count: {log_state.article_count}",
        f"terminology_count: {log_state.terminology_count}",
    ]
    for index, count in log_state.content_counts.items():
        lines.append(f"content_count[{index}]: {count}")
    if log_state.error:
        lines.append(f"error: {log_state.error}")
    lines.append(f"warnings_count: {len(log_state.warnings)}")
    for warning in log_state.warnings:
        parts = [f"rule={warning.rule}", f"reason={warning.reason}"]
        if warning.tag:
            parts.append(f"tag={warning.tag}")
        if warning.display_id:
            parts.append(f"display_id={warning.display_id}")
        if warning.article_index is not None:
            parts.append(f"article_index={warning.article_index}")
        lines.append("warning: " + " ".join(parts))
    return "\n".join(lines) + "\n"


def write_log(log_state: ParseLogState) -> None:
    config.ensure_base_dirs()
    log_path = config.build_log_path(log_state.start_time)
    log_path.write_text(format_log(log_state), encoding="utf-8")
