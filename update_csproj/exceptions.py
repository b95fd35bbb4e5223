"""Fatal error types. Anything raised from here aborts the whole run."""

from __future__ import annotations

from pathlib import Path


class UpdateCsprojError(Exception):
    """Base class for failures that stop the batch."""


class DescriptorDecodeError(UpdateCsprojError):
    def __init__(self, path: Path, encoding: str) -> None:
        super().__init__(f"Could not decode {path} (tried utf-8 and {encoding})")
        self.path = path
        self.encoding = encoding


class DescriptorParseError(UpdateCsprojError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not parse {path}: {reason}")
        self.path = path
        self.reason = reason
