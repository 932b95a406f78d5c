"""
Template Router - Picks the URL template an engine uses for a query.

Rules are checked in declaration order and the first matching rule wins,
so plan authors list more specific rules first. When no rule matches the
engine's default template is used.

A rule whose matcher raises is treated as non-matching and evaluation
moves on to the next rule.
"""

from typing import Optional

from loguru import logger

from launchplan.search.models import Engine, Rule


def select_rule(engine: Engine, query: str) -> Optional[Rule]:
    """
    Find the first rule of an engine whose matcher accepts the query.

    Args:
        engine: Engine whose rules are scanned
        query: Raw query string as typed by the user

    Returns:
        The matching Rule, or None when no rule matches.
    """
    for index, rule in enumerate(engine.rules):
        try:
            matched = rule.matcher(query)
        except Exception as e:
            logger.warning(f"Skipping rule {index} of engine '{engine.name}': {e}")
            continue
        if matched:
            return rule
    return None


def template_for(engine: Engine, rule: Optional[Rule]) -> str:
    """Template of a selected rule; the default when there is none or it is empty."""
    if rule is None:
        return engine.default_template
    return rule.template or engine.default_template


def select_template(engine: Engine, query: str) -> str:
    """Return the URL template to use for this engine and query."""
    return template_for(engine, select_rule(engine, query))
