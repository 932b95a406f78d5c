"""
Plan Parser - Validating deserializer for launch plans.

Plans are written in TOML:

    title = "Everyday"

    [[engines]]
    name = "Web"
    default = "https://duckduckgo.com/?q=QUERY"

      [[engines.rules]]
      prefix = "img:"
      template = "https://duckduckgo.com/?iax=images&ia=images&q=QUERY"

The launch form posts the same engines as a JSON list, where each engine
may nest its fields under "plan" ({"name": ..., "plan": {"default": ...}}).

Text that cannot be parsed raises PlanParseError. Individual engines or
rules that are malformed are dropped with a warning so the rest of the
plan stays usable.
"""

import json
import re
from typing import Any

import toml
from loguru import logger

from launchplan.errors import PlanParseError
from launchplan.search.matchers import Always, Pattern, Prefix, Substring
from launchplan.search.models import Engine, Plan, Rule

MATCHER_KEYS = ("prefix", "contains", "pattern")


class _InvalidEntry(ValueError):
    pass


def parse_plan(text: str) -> Plan:
    """
    Parse TOML plan text.

    Raises:
        PlanParseError: If the text is not valid TOML or has no usable shape
    """
    try:
        data = toml.loads(text or "")
    except Exception as e:
        # toml raises more than TomlDecodeError on malformed documents
        raise PlanParseError(str(e) or type(e).__name__, source="toml") from e
    return build_plan(data)


def parse_engines_json(text: str) -> Plan:
    """
    Parse the JSON engine list submitted by the launch form.

    Raises:
        PlanParseError: If the text is not valid JSON or has no usable shape
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise PlanParseError(str(e), source="json") from e

    if isinstance(data, list):
        data = {"engines": data}
    return build_plan(data)


def build_plan(data: Any) -> Plan:
    """Build a Plan from already-decoded plan data."""
    if not isinstance(data, dict):
        raise PlanParseError(f"Plan must be a table, got {type(data).__name__}")

    title = data.get("title")
    if title is not None and not isinstance(title, str):
        raise PlanParseError("Plan 'title' must be a string")

    entries = data.get("engines", [])
    if not isinstance(entries, list):
        raise PlanParseError("Plan 'engines' must be an array of tables")

    engines = []
    seen = set()
    for index, entry in enumerate(entries):
        try:
            engine = _build_engine(entry)
        except _InvalidEntry as e:
            logger.warning(f"Skipping malformed engine {index}: {e}")
            continue
        if engine.name in seen:
            logger.warning(f"Skipping duplicate engine '{engine.name}'")
            continue
        seen.add(engine.name)
        engines.append(engine)

    logger.debug(f"Parsed plan {title!r} with {len(engines)} engine(s)")
    return Plan(engines=tuple(engines), title=title)


def _build_engine(entry: Any) -> Engine:
    if not isinstance(entry, dict):
        raise _InvalidEntry("engine must be a table")

    fields = dict(entry)
    nested = fields.pop("plan", None)
    if isinstance(nested, dict):
        fields = {**nested, **fields}

    name = fields.get("name")
    if not isinstance(name, str) or not name.strip():
        raise _InvalidEntry("missing 'name'")
    name = name.strip()

    default = fields.get("default")
    if not isinstance(default, str) or not default.strip():
        raise _InvalidEntry(f"engine '{name}' is missing 'default'")

    raw_rules = fields.get("rules", [])
    if not isinstance(raw_rules, list):
        raise _InvalidEntry(f"engine '{name}' has non-array 'rules'")

    rules = []
    for index, raw in enumerate(raw_rules):
        try:
            rules.append(_build_rule(raw))
        except _InvalidEntry as e:
            logger.warning(f"Skipping rule {index} of engine '{name}': {e}")

    return Engine(name=name, default_template=default.strip(), rules=tuple(rules))


def _build_rule(raw: Any) -> Rule:
    if not isinstance(raw, dict):
        raise _InvalidEntry("rule must be a table")

    template = raw.get("template")
    if not isinstance(template, str):
        raise _InvalidEntry("missing 'template'")

    present = [key for key in MATCHER_KEYS if key in raw]
    if len(present) > 1:
        raise _InvalidEntry(f"conflicting matchers {present}")

    trim = _flag(raw, "trim", True)
    if not present:
        matcher = Always()
    else:
        key = present[0]
        value = raw[key]
        if not isinstance(value, str) or not value:
            raise _InvalidEntry(f"'{key}' must be a non-empty string")
        if key == "prefix":
            matcher = Prefix(value, strip=_flag(raw, "strip", True), trim=trim)
        elif key == "contains":
            matcher = Substring(
                value, case_sensitive=_flag(raw, "case_sensitive", False), trim=trim
            )
        else:
            try:
                re.compile(value)
            except re.error as e:
                raise _InvalidEntry(f"invalid pattern {value!r}: {e}") from e
            matcher = Pattern(value, trim=trim)

    return Rule(matcher=matcher, template=template.strip())


def _flag(raw: dict, key: str, default: bool) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise _InvalidEntry(f"'{key}' must be true or false")
    return value
