# e2e/src/actions/cart.py
from __future__ import annotations

from playwright.sync_api import Page

from src.selectors import inventory_selectors as I
from src.selectors import cart_selectors as C


def add_to_cart(page: Page, product: str) -> None:
    page.locator(I.add_to_cart_selector(product)).click()


def remove_from_cart(page: Page, product: str) -> None:
    page.locator(I.remove_selector(product)).click()


def open_cart(page: Page) -> None:
    page.locator(I.CART_LINK_SELECTOR).click()


def checkout(page: Page) -> None:
    page.locator(C.CHECKOUT_BUTTON_SELECTOR).click()
