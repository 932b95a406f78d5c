"""
Exception hierarchy for Launchplan.

PlanParseError is surfaced to callers. MatcherEvaluationError is raised by
rule matchers and absorbed by the template selector.
"""

from typing import Optional


class LaunchplanError(Exception):
    """Base exception for all Launchplan errors."""


class PlanParseError(LaunchplanError):
    """Raised when plan text cannot be deserialized into a Plan."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class MatcherEvaluationError(LaunchplanError):
    """Raised when a rule matcher cannot be evaluated against a query."""

    def __init__(self, message: str, matcher: object = None):
        super().__init__(message)
        self.matcher = matcher
