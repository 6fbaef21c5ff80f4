"""
Built-in validation rules.
"""

from __future__ import annotations

from typing import List

from ..catalog.record import Record
from .engine import ValidationIssue, ValidationRule


class RequiredFieldsRule:
    """Errors when the title is empty.

    The metadata decoder already rejects such records, so this only fires
    for records assembled some other way.
    """

    name = "required-fields"
    description = "Checks that required frontmatter fields are present"

    def validate(self, record: Record) -> List[ValidationIssue]:
        if not record.title:
            return [ValidationIssue.error(record.source, "missing required field 'title'", self.name)]
        return []


class RecommendedFieldsRule:
    """Warns about each missing recommended field independently."""

    name = "recommended-fields"
    description = "Warns about missing recommended fields"

    def validate(self, record: Record) -> List[ValidationIssue]:
        issues = []
        if not record.description:
            issues.append(self._missing(record, "description"))
        if record.created is None:
            issues.append(self._missing(record, "created"))
        if not record.category:
            issues.append(self._missing(record, "category"))
        return issues

    def _missing(self, record: Record, field: str) -> ValidationIssue:
        return ValidationIssue.warning(record.source, f"missing recommended field '{field}'", self.name)


def default_rules() -> List[ValidationRule]:
    return [RequiredFieldsRule(), RecommendedFieldsRule()]
