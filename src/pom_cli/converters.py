from pathlib import Path

from pom_linter.exceptions import ParseError
from pom_linter.models import InternalIssue

from .models import LintIssue, Severity


def internal_issue_to_lint_issue(issue: InternalIssue) -> LintIssue:
    """Convert an internal dataclass issue to an external Pydantic issue"""
    return LintIssue(
        severity=issue.severity.upper(),  # dataclass uses 'warning', Pydantic uses 'WARNING'
        file_path=str(issue.file_path),
        line_number=issue.line,
        column=0,
        rule_id=issue.rule_id,
        message=issue.message,
        message_key=issue.message_key,
        suggestion="Run with --fix to sort dependencies" if issue.auto_fixable else None,
        auto_fixable=issue.auto_fixable,
    )


def parse_error_to_lint_issue(file_path: Path, error: ParseError) -> LintIssue:
    detail = "; ".join(error.errors[:3])
    return LintIssue(
        severity=Severity.ERROR,
        file_path=str(file_path),
        line_number=0,
        column=0,
        rule_id="parse-error",
        message=f"{error}: {detail}" if detail else str(error),
    )
