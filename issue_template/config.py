from __future__ import annotations

from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
LOG_DIR = PROJECT_ROOT / "logs"

LOG_FILE_PREFIX = "issue_parser"
LOG_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
DEFAULT_LOG_RETENTION_DAYS = 5

ARTICLE_TAG = "article"
DEFINITION_TAG = "def"
ARTICLE_TITLE_KEY = "title"
ROOT_METADATA_KEYS = ("language", "currency", "version")
LOCAL_DEFINITION_SCOPE = "local"


def ensure_base_dirs() -> None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)


def build_log_path(ts: datetime | None = None) -> Path:
    if ts is None:
        ts = datetime.now()
    name = f"{LOG_FILE_PREFIX}_{ts.strftime(LOG_TIMESTAMP_FORMAT)}.log"
    return LOG_DIR / name


def iter_log_files() -> list[Path]:
    if not LOG_DIR.is_dir():
        return []
    return sorted(LOG_DIR.glob(f"{LOG_FILE_PREFIX}_*.log"))


def cleanup_logs(
    retention_days: int = DEFAULT_LOG_RETENTION_DAYS,
    now: datetime | None = None,
) -> int:
    """Delete parse logs older than ``retention_days``; return how many went."""
    if retention_days <= 0:
        return 0
    cutoff = (now or datetime.now()).timestamp() - retention_days * 86400
    removed = 0
    for path in iter_log_files():
        try:
            if path.stat().st_mtime >= cutoff:
                continue
            path.unlink()
        except OSError:
            continue
        removed += 1
    return removed
