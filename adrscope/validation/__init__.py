"""
Pluggable validation of decoded records.

Components:
- engine: severities, issues, reports and the rule runner
- rules: built-in required/recommended field checks
"""

from .engine import (
    FunctionRule,
    Severity,
    ValidationIssue,
    ValidationReport,
    ValidationRule,
    Validator,
)
from .rules import RecommendedFieldsRule, RequiredFieldsRule, default_rules

__all__ = [
    "FunctionRule",
    "Severity",
    "ValidationIssue",
    "ValidationReport",
    "ValidationRule",
    "Validator",
    "RecommendedFieldsRule",
    "RequiredFieldsRule",
    "default_rules",
]
