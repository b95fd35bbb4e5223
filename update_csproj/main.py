"""Command line entry point: normalize every *.csproj under the current directory."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .locator import find_files
from .logging import get_logger, log_event
from .models import FileReport, RunReport
from .normalize import update_csproj_file
from .rules import HELP_FLAG, MAX_PROJECT_FILES

logger = get_logger("main")


def _program_name() -> str:
    return Path(sys.argv[0]).stem if sys.argv and sys.argv[0] else "update-csproj"


def process_files(files: List[Path], report: RunReport) -> RunReport:
    for path in files:
        outcome = update_csproj_file(path)
        item = FileReport(path=str(path), outcome=outcome)
        report.add(item)
        print(item.message)
    return report


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    # No usage text yet; the flag only stops the run.
    if args and args[0] == HELP_FLAG:
        return -1

    try:
        root = Path.cwd()
        files = find_files(root)
        if len(files) > MAX_PROJECT_FILES:
            log_event(logger, "run.too_many_files", {"found": len(files), "limit": MAX_PROJECT_FILES})
            print("Too many csproj files to process: the limit is three.", file=sys.stderr)
            return -1

        report = process_files(files, RunReport(root=str(root)))
    except Exception as exc:
        log_event(logger, "run.failed", {"error": type(exc).__name__})
        print(f"{_program_name()} Error: {exc}", file=sys.stderr)
        return -1

    log_event(logger, "run.done", report.summary.model_dump())
    return 0


def run() -> None:
    sys.exit(main())
