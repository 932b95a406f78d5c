"""
Shared test fixtures for the Launchplan test suite.

Provides plan and settings files that use real file I/O (no mocking of
the filesystem).
"""

import pytest
import toml

from launchplan.search.matchers import Prefix
from launchplan.search.models import Engine, Plan, Rule

PLAN_TOML = """
title = "Test plan"

[[engines]]
name = "Web"
default = "https://s.example/?q=QUERY"

  [[engines.rules]]
  prefix = "img:"
  template = "https://imgs.example/?q=QUERY"

  [[engines.rules]]
  contains = "weather"
  template = "https://weather.example/?city=QUERY"

[[engines]]
name = "Wiki"
default = "https://wiki.example/search?q=QUERY"

[[engines]]
name = "Code"
default = "https://code.example/?q=QUERY"

  [[engines.rules]]
  pattern = '^#(?P<query>\\d+)$'
  template = "https://code.example/issues/QUERY"
"""


@pytest.fixture
def plan_text():
    return PLAN_TOML


@pytest.fixture
def tmp_plan(tmp_path):
    """Write the test plan to a real TOML file."""
    plan_path = tmp_path / "plan.toml"
    plan_path.write_text(PLAN_TOML)
    return plan_path


@pytest.fixture
def web_engine():
    return Engine(
        name="Web",
        default_template="https://s.example/?q=QUERY",
        rules=(Rule(matcher=Prefix("img:"), template="https://imgs.example/?q=QUERY"),),
    )


@pytest.fixture
def three_engine_plan(web_engine):
    return Plan(engines=(
        web_engine,
        Engine(name="B", default_template="https://b.example/?q=QUERY"),
        Engine(name="C", default_template="https://c.example/QUERY"),
    ))


@pytest.fixture
def tmp_settings(tmp_path, monkeypatch):
    """Create a real settings TOML file and point LAUNCHPLAN_SETTINGS at it."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "cookie": {"name": "testPlan", "max_age_days": 7},
        "logging": {"level": "DEBUG"},
    }
    settings_path.write_text(toml.dumps(data))
    monkeypatch.setenv("LAUNCHPLAN_SETTINGS", str(settings_path))
    return settings_path
