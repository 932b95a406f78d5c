"""
Plan data model - Engines, rules and resolved destinations.

A Plan is an ordered sequence of Engines. Each Engine has a default URL
template and an ordered list of Rules that may override it for particular
queries. Templates mark the query position with the QUERY token.
"""

from dataclasses import dataclass
from typing import Callable, Optional

PLACEHOLDER = "QUERY"

Matcher = Callable[[str], bool]


@dataclass(frozen=True)
class Rule:
    """A conditional template: used when matcher(query) is true."""
    matcher: Matcher
    template: str


@dataclass(frozen=True)
class Engine:
    """One named destination."""
    name: str
    default_template: str
    rules: tuple[Rule, ...] = ()


@dataclass(frozen=True)
class Plan:
    """Ordered engines. Order decides redirect priority."""
    engines: tuple[Engine, ...] = ()
    title: Optional[str] = None

    def __iter__(self):
        return iter(self.engines)

    def __len__(self) -> int:
        return len(self.engines)


@dataclass(frozen=True)
class Destination:
    """A resolved {name, url} pair."""
    name: str
    url: str

    def to_dict(self) -> dict:
        return {"name": self.name, "url": self.url}
