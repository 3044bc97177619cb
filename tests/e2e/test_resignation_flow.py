"""
Resignation signatures and report generation through the admin UI.

Expects the deployment to hold at least one approved resignation; tests
skip themselves when the page offers nothing to act on.
"""

import pytest

from tests.e2e.config import e2e_settings

pytestmark = pytest.mark.e2e

LABELS = e2e_settings.labels


def button(page, text):
    return page.locator(f'button:has-text("{text}")')


def open_resignations(page):
    page.goto(e2e_settings.url("/web/resignation.html"))
    page.wait_for_timeout(e2e_settings.TIMEOUT_SHORT)


def fill_report_form(page):
    page.fill("#workSummary", e2e_settings.report.work_summary)
    page.fill("#unfinishedTasks", e2e_settings.report.unfinished_tasks)


def test_sign_and_generate_opens_wizard(admin_page):
    open_resignations(admin_page)
    smart_buttons = button(admin_page, LABELS.sign_and_generate)
    if smart_buttons.count() == 0:
        pytest.skip("no approved resignation to sign")

    smart_buttons.first.click()

    assert admin_page.locator("#modal").is_visible()
    assert admin_page.locator("#modalBody").text_content().strip()


def test_report_with_signatures_rendered_in_frame(admin_page):
    open_resignations(admin_page)
    smart_buttons = button(admin_page, LABELS.sign_and_generate)
    if smart_buttons.count() == 0:
        pytest.skip("no approved resignation to sign")

    smart_buttons.first.click()
    auto_sign = button(admin_page, LABELS.auto_sign_and_generate)
    if auto_sign.is_visible():
        auto_sign.click()
    else:
        button(admin_page, LABELS.generate_with_signatures).click()
    admin_page.wait_for_timeout(e2e_settings.TIMEOUT_MEDIUM)

    assert admin_page.locator("#reportForm").is_visible()
    fill_report_form(admin_page)
    button(admin_page, LABELS.generate_report).last.click()
    admin_page.wait_for_timeout(e2e_settings.TIMEOUT_MEDIUM)

    button(admin_page, LABELS.resignation_reports).click()
    button(admin_page, LABELS.view).last.click()
    admin_page.wait_for_timeout(e2e_settings.TIMEOUT_SHORT)

    assert admin_page.locator(f"text={LABELS.new_format_badge}").is_visible()
    assert admin_page.locator(f"text={LABELS.signed_badge}").is_visible()

    report = admin_page.frame_locator("#reportFrame")
    assert report.locator(f"text={LABELS.voluntary_type}").first.is_visible()
    assert report.locator("img").count() > 0


def test_direct_report_without_signatures(admin_page):
    open_resignations(admin_page)
    report_buttons = button(admin_page, LABELS.generate_report)
    if report_buttons.count() == 0:
        pytest.skip("no resignation ready for a report")

    report_buttons.first.click()
    direct = button(admin_page, LABELS.generate_directly)
    if not direct.is_visible():
        pytest.skip("all signatures already collected")

    direct.click()
    admin_page.wait_for_timeout(e2e_settings.TIMEOUT_SHORT)
    assert admin_page.locator("#reportForm").is_visible()


def test_signing_page_accepts_canvas_signature(admin_page, browser):
    open_resignations(admin_page)
    smart_buttons = button(admin_page, LABELS.sign_and_generate)
    if smart_buttons.count() == 0:
        pytest.skip("no approved resignation to sign")

    smart_buttons.first.click()
    link = admin_page.locator('#modalBody a[href*="sign-resignation.html"]')
    if link.count() == 0:
        pytest.skip("wizard offered no signing link")
    href = link.first.get_attribute("href")

    context = browser.new_context()
    sign_page = context.new_page()
    try:
        sign_page.goto(e2e_settings.url(href) if href.startswith("/") else href)
        canvas = sign_page.locator("canvas#signaturePad")
        box = canvas.bounding_box()
        assert box is not None

        sign_page.mouse.move(box["x"] + 20, box["y"] + box["height"] / 2)
        sign_page.mouse.down()
        sign_page.mouse.move(box["x"] + box["width"] - 20, box["y"] + box["height"] / 3, steps=10)
        sign_page.mouse.up()

        sign_page.on("dialog", lambda dialog: dialog.accept())
        button(sign_page, LABELS.submit_signature).click()
        sign_page.wait_for_timeout(e2e_settings.TIMEOUT_MEDIUM)
    finally:
        context.close()
