from __future__ import annotations

from dataclasses import dataclass

from tableview.core.exceptions import TableViewError


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str


class SchemaError(TableViewError):
    """
    Input records are malformed or do not share the same field names.
    """

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in issues))
