# e2e/src/actions/session.py
from __future__ import annotations

from playwright.sync_api import Page


def reset_session(page: Page, base_url: str) -> None:
    # localStorage はオリジン単位なので、先にトップを開いてから消す
    page.goto(base_url, wait_until="domcontentloaded")
    page.context.clear_cookies()
    page.evaluate("() => window.localStorage.clear()")
