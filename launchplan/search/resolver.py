"""
URL Resolver - Turns a plan and a query into destination URLs.

For each engine, in plan order:
  1. pick the template (first matching rule, else the default)
  2. trim and percent-encode the query
  3. replace the QUERY token in the template

An empty result falls back to the local search page, /?q=<query>.
Engines that fail to resolve are left out of the result list.
"""

import urllib.parse

from loguru import logger

from launchplan.search.matchers import extract_query
from launchplan.search.models import PLACEHOLDER, Destination, Engine, Plan
from launchplan.search.router import select_rule, template_for

# Characters encodeURIComponent leaves alone, besides letters and digits
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_query(query: str) -> str:
    """Trim and percent-encode a query (space becomes %20)."""
    return urllib.parse.quote(query.strip(), safe=_URI_COMPONENT_SAFE)


def local_search_url(encoded_query: str) -> str:
    """Fallback destination used when a template produces nothing."""
    return f"/?q={encoded_query}"


def apply_template(template: str, encoded_query: str) -> str:
    """Substitute the encoded query at the first QUERY token."""
    url = template.replace(PLACEHOLDER, encoded_query, 1)
    if not url:
        return local_search_url(encoded_query)
    return url


def resolve_engine(engine: Engine, query: str) -> Destination:
    """Resolve a single engine to its destination."""
    rule = select_rule(engine, query)
    term = query
    if rule is not None:
        try:
            term = extract_query(rule.matcher, query)
        except Exception as e:
            logger.warning(f"Could not narrow query for engine '{engine.name}': {e}")

    url = apply_template(template_for(engine, rule) or "", encode_query(term))
    return Destination(name=engine.name, url=url)


def resolve(plan: Plan, query: str) -> list[Destination]:
    """
    Resolve every engine of a plan, preserving plan order.

    Args:
        plan: Plan (or any iterable of Engines)
        query: Raw query string

    Returns:
        List of Destinations. Empty when the plan has no usable engines;
        callers redirect to the first entry.
    """
    query = query or ""
    destinations = []
    for engine in plan:
        try:
            destinations.append(resolve_engine(engine, query))
        except Exception:
            logger.exception(f"Skipping unreadable engine: {engine!r}")

    logger.debug(f"Resolved {len(destinations)} destination(s) for {query!r}")
    return destinations
