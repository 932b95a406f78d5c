"""
Search package - Plan model, template routing and URL resolution.

Queries are resolved against every engine of a launch plan; each engine
picks its template by first-match over its rules.
"""

from .matchers import Always, Pattern, Prefix, Substring
from .models import Destination, Engine, Plan, Rule
from .resolver import local_search_url, resolve, resolve_engine
from .router import select_rule, select_template

__all__ = [
    "Always",
    "Destination",
    "Engine",
    "Pattern",
    "Plan",
    "Prefix",
    "Rule",
    "Substring",
    "local_search_url",
    "resolve",
    "resolve_engine",
    "select_rule",
    "select_template",
]
