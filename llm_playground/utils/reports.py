"""Markdown report files named after the moment they were generated."""

import os
from datetime import datetime
from typing import Optional

from llm_playground.utils.logger import logger


def build_report_filename(prefix: str, now: datetime) -> str:
    """
    Return ``<prefix>_<YYYY-MM-DD>_<HH-MM-SS>.md``.

    Date and time are both read from ``now``.

    Examples:
        >>> build_report_filename("swarm_report", datetime(2024, 3, 5, 14, 7, 9))
        'swarm_report_2024-03-05_14-07-09.md'
    """
    return f"{prefix}_{now.strftime('%Y-%m-%d')}_{now.strftime('%H-%M-%S')}.md"


def write_markdown_report(
    content: str,
    prefix: str,
    reports_dir: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    """Write ``content`` to a timestamped markdown file and return its path."""
    if reports_dir is None:
        from llm_playground.config.common_settings import REPORTS_DIR
        reports_dir = REPORTS_DIR

    os.makedirs(reports_dir, exist_ok=True)
    path = os.path.join(reports_dir, build_report_filename(prefix, now or datetime.now()))

    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info(f"[Reports] Report saved to {path}")
    return path
