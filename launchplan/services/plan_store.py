"""
Plan Store - Client-held persistence for launch plan text.

Plans never live on the server. The TOML text is compressed with lz-string
(EncodedURIComponent flavour, compatible with the browser client) and kept
in a cookie or embedded in a share link as the "p" query parameter.

The store works on opaque plan text; parsing belongs to plan_parser.
"""

import re
from pathlib import Path
from typing import Optional

from loguru import logger
from lzstring import LZString

SAMPLE_PLAN_PATH = Path(__file__).parent.parent / "plans" / "sample.toml"

_TITLE_LINE = re.compile(r"title\s*=\s*")

_lz = LZString()


def compress(text: str) -> str:
    """Compress plan text into a URL-safe token."""
    return _lz.compressToEncodedURIComponent(text or "")


def decompress(token: Optional[str]) -> str:
    """
    Decompress a token produced by compress().

    Returns:
        The plan text, or "" when the token is empty or undecodable
    """
    if not token:
        return ""
    try:
        return _lz.decompressFromEncodedURIComponent(token) or ""
    except Exception as e:
        logger.warning(f"Could not decompress plan token ({len(token)} chars): {e}")
        return ""


def load_sample_plan() -> str:
    """Bundled sample plan, used when the user has none yet."""
    return SAMPLE_PLAN_PATH.read_text(encoding="utf-8")


def load_plan_text(share_token: Optional[str] = None, cookie_token: Optional[str] = None) -> str:
    """
    Pick the plan to show: share link first, then cookie, then the sample.

    Args:
        share_token: Compressed plan from the "p" query parameter
        cookie_token: Compressed plan from the plan cookie
    """
    token = share_token or cookie_token or ""
    return decompress(token) or load_sample_plan()


def share_link(origin: str, text: str, param: str = "p") -> str:
    """Build a link that opens the app with this plan loaded."""
    return f"{origin.rstrip('/')}?{param}={compress(text)}"


def merge_plans(saved_text: str, incoming_text: str) -> str:
    """
    Append an incoming plan to the saved one.

    The incoming plan's title line is commented out so the saved title
    stays the only one. If either side is empty the incoming text is
    returned unchanged.
    """
    untitled = _TITLE_LINE.sub(lambda m: f"# {m.group(0)}", incoming_text or "", count=1)
    if saved_text and untitled:
        return f"{saved_text}\n\n{untitled}"
    return incoming_text
