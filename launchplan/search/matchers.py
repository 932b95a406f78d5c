"""
Rule matchers - The predicates a plan can attach to a rule.

Four variants are understood by the plan format:

  prefix = "img:"     → Prefix    (query starts with text, prefix is stripped)
  contains = "cats"   → Substring (text occurs anywhere in the query)
  pattern = "^\\d+$"  → Pattern   (regular expression search)
  (none of the above) → Always

Each matcher is a callable taking the raw query. Matchers that narrow the
query (a stripped prefix, a named "query" group) expose that through
extract(). Any plain callable str -> bool is also accepted as a matcher.
"""

import re
from dataclasses import dataclass

from launchplan.errors import MatcherEvaluationError


def _prepare(query: str, trim: bool) -> str:
    return query.strip() if trim else query


@dataclass(frozen=True)
class Prefix:
    prefix: str
    strip: bool = True
    trim: bool = True

    def __call__(self, query: str) -> bool:
        return _prepare(query, self.trim).startswith(self.prefix)

    def extract(self, query: str) -> str:
        q = _prepare(query, self.trim)
        if self.strip and q.startswith(self.prefix):
            return q[len(self.prefix):]
        return q


@dataclass(frozen=True)
class Substring:
    text: str
    case_sensitive: bool = False
    trim: bool = True

    def __call__(self, query: str) -> bool:
        q = _prepare(query, self.trim)
        if self.case_sensitive:
            return self.text in q
        return self.text.lower() in q.lower()


@dataclass(frozen=True)
class Pattern:
    pattern: str
    trim: bool = True

    def _compile(self) -> re.Pattern:
        # re keeps its own compile cache
        try:
            return re.compile(self.pattern)
        except re.error as e:
            raise MatcherEvaluationError(
                f"Invalid pattern {self.pattern!r}: {e}", matcher=self
            ) from e

    def __call__(self, query: str) -> bool:
        return self._compile().search(_prepare(query, self.trim)) is not None

    def extract(self, query: str) -> str:
        """Text of the named group "query" when the pattern has one."""
        compiled = self._compile()
        q = _prepare(query, self.trim)
        match = compiled.search(q)
        if match and "query" in compiled.groupindex and match.group("query") is not None:
            return match.group("query")
        return q


@dataclass(frozen=True)
class Always:
    def __call__(self, query: str) -> bool:
        return True


def extract_query(matcher, query: str) -> str:
    """Return the part of the query a matched rule wants substituted."""
    extract = getattr(matcher, "extract", None)
    if extract is None:
        return query
    return extract(query)
