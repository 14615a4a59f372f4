import logging
import sys
import tempfile
from pathlib import Path
from typing import Optional

LOG_FORMAT = "[%(levelname)s] %(message)s"
FALLBACK_LOG = Path(tempfile.gettempdir()) / "patterns_deck.log"


def open_log_file(log_path) -> logging.FileHandler:
    """
    File handler for LOG_PATH; falls back to FALLBACK_LOG when the
    path cannot be created or opened.
    """
    log_path = Path(log_path)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        print(f"[Warning] Cannot write log file {log_path}: {e}. Using {FALLBACK_LOG}", file=sys.stderr)
        return logging.FileHandler(FALLBACK_LOG, encoding="utf-8")


def setup_logging(verbose: bool = False, log_path: Optional[str] = None) -> None:
    handlers = [logging.StreamHandler()]
    if log_path:
        handlers.append(open_log_file(log_path))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
