# e2e/src/flows/steps.py
from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from playwright.sync_api import Page

from src.core.config import Settings
from src.core.types import Step
from src.actions.login import login
from src.actions.session import reset_session
from src.actions import cart
from src.flows import expectations as E

StepFn = Callable[..., None]


def _login(page: Page, settings: Settings, username: str, password: Optional[str] = None) -> None:
    login(page, settings.base_url, username, settings.password if password is None else str(password))


def _reset_session(page: Page, settings: Settings) -> None:
    reset_session(page, settings.base_url)


def _add_to_cart(page: Page, settings: Settings, product: str) -> None:
    cart.add_to_cart(page, product)


def _remove_from_cart(page: Page, settings: Settings, product: str) -> None:
    cart.remove_from_cart(page, product)


def _open_cart(page: Page, settings: Settings) -> None:
    cart.open_cart(page)


def _checkout(page: Page, settings: Settings) -> None:
    cart.checkout(page)


ACTIONS: Dict[str, StepFn] = {
    "reset_session": _reset_session,
    "login": _login,
    "add_to_cart": _add_to_cart,
    "remove_from_cart": _remove_from_cart,
    "open_cart": _open_cart,
    "checkout": _checkout,
}

EXPECTATIONS: Dict[str, StepFn] = {
    "blocked": lambda page, settings, message: E.assert_blocked(page, str(message)),
    "admitted": lambda page, settings, location: E.assert_url_contains(page, str(location)),
    "url_contains": lambda page, settings, value: E.assert_url_contains(page, str(value)),
    "product_count": lambda page, settings, count: E.assert_product_count(page, int(count)),
    "cart_badge": lambda page, settings, text: E.assert_cart_badge(page, str(text)),
    "cart_item_count": lambda page, settings, count: E.assert_cart_item_count(page, int(count)),
    "product_names_absent": lambda page, settings: E.assert_product_names_absent(page),
}

STEPS: Dict[str, Dict[str, StepFn]] = {"do": ACTIONS, "expect": EXPECTATIONS}


def resolve(step: Step, registry: Dict[str, Dict[str, Any]] = STEPS) -> StepFn:
    table = registry.get(step.kind)
    if table is None or step.name not in table:
        raise ValueError(f"Unknown step: {step}")
    return table[step.name]
