"""
Tests for client-held plan persistence: compression, loading, merging.
"""

from launchplan.services.plan_store import (
    compress,
    decompress,
    load_plan_text,
    load_sample_plan,
    merge_plans,
    share_link,
)


class TestCompression:

    def test_compressed_token_is_url_safe(self, plan_text):
        token = compress(plan_text)
        assert token
        assert all(c.isalnum() or c in "+-$" for c in token)

    def test_decompress_restores_text(self, plan_text):
        assert decompress(compress(plan_text)) == plan_text

    def test_decompress_empty_token(self):
        assert decompress("") == ""
        assert decompress(None) == ""


class TestLoadPlanText:
    """Share link beats cookie, cookie beats the sample plan."""

    def test_share_token_first(self):
        assert load_plan_text(compress("shared"), compress("cookie")) == "shared"

    def test_cookie_when_no_share_token(self):
        assert load_plan_text(None, compress("cookie")) == "cookie"

    def test_sample_when_nothing_stored(self):
        assert load_plan_text() == load_sample_plan()


class TestMergePlans:

    def test_incoming_title_is_commented_out(self):
        merged = merge_plans('title = "Mine"\n', 'title = "Theirs"\n[[engines]]\n')
        assert merged == 'title = "Mine"\n\n\n# title = "Theirs"\n[[engines]]\n'

    def test_empty_saved_plan_returns_incoming(self):
        assert merge_plans("", 'title = "Theirs"') == 'title = "Theirs"'

    def test_empty_incoming_returns_incoming(self):
        assert merge_plans('title = "Mine"', "") == ""


class TestShareLink:

    def test_share_link(self, plan_text):
        link = share_link("https://launch.example/", plan_text)
        assert link.startswith("https://launch.example?p=")
        assert decompress(link.split("?p=", 1)[1]) == plan_text
