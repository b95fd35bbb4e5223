from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class ProjectFileError(str, Enum):
    NONE = "none"
    NO_PROJECT_ROOT = "no_project_root"
    NO_SDK_ATTRIBUTE = "no_sdk_attribute"
    NO_PROPERTY_GROUP = "no_property_group"


_MESSAGES = {
    ProjectFileError.NONE: "Updated file {path}",
    ProjectFileError.NO_PROJECT_ROOT: "File {path} does not have <Project> as the root element",
    ProjectFileError.NO_SDK_ATTRIBUTE: (
        "File {path} has a <Project> root node but does not have an Sdk Attribute in the root node"
    ),
    ProjectFileError.NO_PROPERTY_GROUP: (
        "File {path} has a <Project> root node and Sdk attribute "
        "but does not have any PropertyGroup nodes"
    ),
}


class FileReport(BaseModel):
    path: str
    outcome: ProjectFileError

    @property
    def updated(self) -> bool:
        return self.outcome is ProjectFileError.NONE

    @property
    def message(self) -> str:
        return _MESSAGES[self.outcome].format(path=self.path)


class ReportSummary(BaseModel):
    files: int = 0
    updated: int = 0
    skipped: int = 0


class RunReport(BaseModel):
    root: str
    summary: ReportSummary = Field(default_factory=ReportSummary)
    files: List[FileReport] = Field(default_factory=list)

    def add(self, report: FileReport) -> None:
        self.files.append(report)
        self.summary.files += 1
        if report.updated:
            self.summary.updated += 1
        else:
            self.summary.skipped += 1
