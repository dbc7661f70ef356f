"""
Tests for the browser-side helpers on the dashboard and add-entry pages.
The functions are cut out of the rendered HTML and run in QuickJS, so the
code under test is exactly what the browser receives.
"""
import json
import re

import pytest
import quickjs

from entries import SHARE_TEMPLATE


def _script_function(html: str, name: str) -> str:
    match = re.search(rf"^function {name}\(.*?^\}}$", html, re.M | re.S)
    assert match, f"{name} not found in page"
    return match.group(0)


def _js_context(html: str, *names: str) -> quickjs.Context:
    ctx = quickjs.Context()
    for name in names:
        ctx.eval(_script_function(html, name))
    return ctx


def _call(ctx: quickjs.Context, name: str, *args):
    return ctx.eval(f"{name}({', '.join(json.dumps(a) for a in args)})")


@pytest.fixture
def dashboard_js(auth_client):
    html = auth_client.get("/dashboard").get_data(as_text=True)
    return _js_context(html, "formatDayMonthYear", "matchesSearch", "shareMessage")


@pytest.fixture
def add_page_js(auth_client):
    html = auth_client.get("/add").get_data(as_text=True)
    return _js_context(html, "deriveEndDate")


class TestSearchFilter:
    def test_gmail_match_ignores_case(self, dashboard_js, entry_data):
        assert _call(dashboard_js, "matchesSearch", entry_data, "CUSTOMER@Gmail") is True

    def test_mobile_only_match(self, dashboard_js, entry_data):
        """A term found only in the mobile number still matches."""
        assert _call(dashboard_js, "matchesSearch", entry_data, "0171234") is True

    def test_no_match(self, dashboard_js, entry_data):
        assert _call(dashboard_js, "matchesSearch", entry_data, "someone-else") is False

    def test_empty_term_matches_everything(self, dashboard_js, entry_data):
        assert _call(dashboard_js, "matchesSearch", entry_data, "") is True


class TestShareMessage:
    def test_display_date(self, dashboard_js):
        assert _call(dashboard_js, "formatDayMonthYear", "2025-01-15") == "15/01/2025"

    def test_display_date_keeps_unparseable_value(self, dashboard_js):
        assert _call(dashboard_js, "formatDayMonthYear", "soon") == "soon"

    def test_message_embeds_credentials(self, dashboard_js, entry_data):
        message = _call(dashboard_js, "shareMessage", SHARE_TEMPLATE, entry_data)
        assert "*E-mail:* customer@gmail.com" in message
        assert "*Pass:* Zoom#2025" in message
        assert "*Account No:* 1" in message
        assert "*End Date:* 15/01/2025" in message
        assert message.startswith("*Product*")
        assert message.endswith("Thank you for choosing *LSBD*.")

    @pytest.mark.parametrize("password", ["{x}", "pa$&ss", "a$'b"])
    def test_special_characters_in_password_survive(self, dashboard_js, entry_data, password):
        message = _call(dashboard_js, "shareMessage", SHARE_TEMPLATE, {**entry_data, "password": password})
        assert f"*Pass:* {password}\n" in message


class TestEndDateDerivation:
    @pytest.mark.parametrize("start, end", [
        ("2025-01-01", "2025-01-15"),
        ("2024-02-20", "2024-03-05"),
        ("2025-12-25", "2026-01-08"),
    ])
    def test_two_weeks_after_start(self, add_page_js, start, end):
        assert _call(add_page_js, "deriveEndDate", start, 14) == end

    def test_page_uses_fourteen_day_term(self, auth_client):
        html = auth_client.get("/add").get_data(as_text=True)
        assert "const TERM_DAYS = 14;" in html
        assert "deriveEndDate(e.target.value, TERM_DAYS)" in html
