"""
Validation engine for ADRs.

A rule is any object with 'name', 'description' and a side-effect-free
'validate(record)' returning a list of issues. The Validator runs its rules
in order and collects their issues into a ValidationReport.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Iterable, List, Optional, Protocol, Sequence, Tuple

from ..catalog.record import Record


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationIssue:
    """A single problem found in a record."""
    severity: Severity
    source: str
    message: str
    rule: str
    line: Optional[int] = None

    @classmethod
    def error(cls, source: str, message: str, rule: str) -> "ValidationIssue":
        return cls(Severity.ERROR, source, message, rule)

    @classmethod
    def warning(cls, source: str, message: str, rule: str) -> "ValidationIssue":
        return cls(Severity.WARNING, source, message, rule)

    def with_line(self, line: int) -> "ValidationIssue":
        return replace(self, line=line)

    def __str__(self) -> str:
        location = f":{self.line}" if self.line is not None else ""
        return f"{self.severity}: {self.source}{location}: {self.message} [{self.rule}]"


class ValidationReport:
    """Ordered issues from one or more records. Issues are never deduplicated."""

    def __init__(self, issues: Optional[Iterable[ValidationIssue]] = None):
        self._issues: List[ValidationIssue] = list(issues or [])

    def add_issue(self, issue: ValidationIssue) -> None:
        self._issues.append(issue)

    def add_issues(self, issues: Iterable[ValidationIssue]) -> None:
        self._issues.extend(issues)

    def merge(self, other: "ValidationReport") -> None:
        self._issues.extend(other.issues)

    @property
    def issues(self) -> List[ValidationIssue]:
        return list(self._issues)

    def issues_by_severity(self, severity: Severity) -> List[ValidationIssue]:
        return [issue for issue in self._issues if issue.severity == severity]

    def errors(self) -> List[ValidationIssue]:
        return self.issues_by_severity(Severity.ERROR)

    def warnings(self) -> List[ValidationIssue]:
        return self.issues_by_severity(Severity.WARNING)

    @property
    def error_count(self) -> int:
        return len(self.errors())

    @property
    def warning_count(self) -> int:
        return len(self.warnings())

    def has_errors(self) -> bool:
        return self.error_count > 0

    def is_valid(self) -> bool:
        """True when there are no error-level issues. Warnings do not count."""
        return not self.has_errors()

    def __len__(self) -> int:
        return len(self._issues)

    def __iter__(self):
        return iter(self._issues)


class ValidationRule(Protocol):
    name: str
    description: str

    def validate(self, record: Record) -> List[ValidationIssue]:
        ...


@dataclass(frozen=True)
class FunctionRule:
    """Adapts a plain function into a validation rule.

    Example:
        >>> no_tags = FunctionRule(
        ...     "has-tags", "Warns when a record has no tags",
        ...     lambda r: [] if r.tags else [ValidationIssue.warning(r.source, "no tags", "has-tags")],
        ... )
    """
    name: str
    description: str
    check: Callable[[Record], Sequence[ValidationIssue]]

    def validate(self, record: Record) -> List[ValidationIssue]:
        return list(self.check(record))


@dataclass
class Validator:
    """Runs an ordered list of rules against records."""
    rules: List[ValidationRule] = field(default_factory=list)

    def add_rule(self, rule: ValidationRule) -> None:
        self.rules.append(rule)

    def validate(self, record: Record) -> ValidationReport:
        """Validate one record; issues follow rule order."""
        report = ValidationReport()
        for rule in self.rules:
            report.add_issues(rule.validate(record))
        return report

    def validate_all(self, records: Iterable[Record]) -> ValidationReport:
        """Validate a batch into a single report, in batch order."""
        report = ValidationReport()
        for record in records:
            report.merge(self.validate(record))
        return report

    def validate_each(self, records: Iterable[Record]) -> List[Tuple[Record, ValidationReport]]:
        return [(record, self.validate(record)) for record in records]
