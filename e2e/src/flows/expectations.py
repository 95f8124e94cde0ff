# e2e/src/flows/expectations.py
from __future__ import annotations

import re

from playwright.sync_api import Page, expect

from src.selectors import login_selectors as L
from src.selectors import inventory_selectors as I
from src.selectors import cart_selectors as C


def assert_blocked(page: Page, message: str) -> None:
    err = page.locator(L.LOGIN_ERROR_SELECTOR)
    expect(err).to_be_visible()
    expect(err).to_contain_text(message)


def assert_url_contains(page: Page, value: str) -> None:
    # 部分一致（RegExp.test 相当）
    expect(page).to_have_url(re.compile(re.escape(value)))


def assert_product_count(page: Page, count: int) -> None:
    items = page.locator(I.INVENTORY_LIST_SELECTOR).locator(I.INVENTORY_ITEM_SELECTOR)
    expect(items).to_have_count(count)


def assert_cart_badge(page: Page, text: str) -> None:
    expect(page.locator(I.CART_LINK_SELECTOR)).to_have_text(text)


def assert_cart_item_count(page: Page, count: int) -> None:
    expect(page.locator(C.CART_ITEM_SELECTOR)).to_have_count(count)


def assert_product_names_absent(page: Page) -> None:
    expect(page.locator(I.INVENTORY_ITEM_NAME_SELECTOR)).to_have_count(0)
