# Launchplan Services Package
"""
Plan parsing and client-side plan persistence.
"""

from .plan_parser import build_plan, parse_engines_json, parse_plan
from .plan_store import compress, decompress, load_plan_text, merge_plans, share_link

__all__ = [
    "build_plan",
    "parse_engines_json",
    "parse_plan",
    "compress",
    "decompress",
    "load_plan_text",
    "merge_plans",
    "share_link",
]
