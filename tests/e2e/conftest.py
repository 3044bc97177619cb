"""
Browser fixtures for the end-to-end suite.

Tests marked `e2e` are skipped unless Playwright is installed and
TEST_BASE_URL is set. A screenshot is saved for every failing test.
"""

import importlib.util
from pathlib import Path

import pytest

from tests.e2e.config import e2e_settings


def skip_reason():
    if importlib.util.find_spec("playwright") is None:
        return "playwright not installed"
    if not e2e_settings.BASE_URL:
        return "TEST_BASE_URL not set"
    return None


def pytest_collection_modifyitems(config, items):
    reason = skip_reason()
    if reason is None:
        return
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(pytest.mark.skip(reason=reason))


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(scope="session")
def browser():
    from playwright.sync_api import sync_playwright

    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(
            headless=e2e_settings.HEADLESS, slow_mo=e2e_settings.SLOW_MO
        )
        yield browser
        browser.close()


@pytest.fixture
def page(browser, request):
    context = browser.new_context()
    page = context.new_page()
    page.set_default_timeout(e2e_settings.TIMEOUT_PAGE_LOAD)
    # Accept the confirm/alert dialogs the admin UI raises
    page.on("dialog", lambda dialog: dialog.accept())

    yield page

    call_report = getattr(request.node, "rep_call", None)
    if call_report is not None and call_report.failed:
        directory = Path(e2e_settings.SCREENSHOT_DIR)
        directory.mkdir(parents=True, exist_ok=True)
        page.screenshot(path=str(directory / f"{request.node.name}-error.png"), full_page=True)
    context.close()


@pytest.fixture
def admin_page(page):
    """Page logged in as the admin user."""
    page.goto(e2e_settings.url("/web/login.html"))
    page.fill('input[type="text"]', e2e_settings.ADMIN_USER)
    page.fill('input[type="password"]', e2e_settings.ADMIN_PASS)
    with page.expect_navigation():
        page.click('button[type="submit"]')
    return page
