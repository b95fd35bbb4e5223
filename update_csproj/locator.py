from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import List

from .logging import get_logger, log_event
from .rules import PROJECT_FILE_PATTERN

logger = get_logger("locator")


def find_files(start_dir: Path, pattern: str = PROJECT_FILE_PATTERN) -> List[Path]:
    """
    Collect every file matching ``pattern`` under ``start_dir``.

    Walks with an explicit stack so deep trees can't hit the recursion limit.
    Result order follows the walk and is not sorted. A directory that can't be
    listed raises OSError and ends the run.
    """
    result: List[Path] = []
    stack: List[Path] = [Path(start_dir)]

    while stack:
        current = stack.pop()
        for entry in current.iterdir():
            if entry.is_dir():
                if not entry.is_symlink():
                    stack.append(entry)
            elif fnmatch(entry.name, pattern):
                result.append(entry)

    log_event(logger, "locate.done", {"root": str(start_dir), "pattern": pattern, "found": len(result)})
    return result
