# e2e/src/actions/login.py
from __future__ import annotations

from playwright.sync_api import Page

from src.selectors import login_selectors as L


def login(page: Page, base_url: str, username: str, password: str) -> None:
    """
    トップを開いて username / password を入力し、ログインボタンを押す。
    成否はここでは判定しない（ロック済みユーザーの確認にも同じ操作を使うため）。
    要素が無ければ Playwright の TimeoutError でそのまま落ちる。
    """
    page.goto(base_url, wait_until="domcontentloaded")
    page.locator(L.USERNAME_INPUT_SELECTOR).fill(username)
    page.locator(L.PASSWORD_INPUT_SELECTOR).fill(password)
    page.locator(L.LOGIN_BUTTON_SELECTOR).click()
