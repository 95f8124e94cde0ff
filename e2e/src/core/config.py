# e2e/src/core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

E2E_DIR = Path(__file__).resolve().parents[2]

DEFAULT_BASE_URL = "https://www.saucedemo.com/"
DEFAULT_PASSWORD = "secret_sauce"
DEFAULT_SCENARIO_FILE = E2E_DIR / "scenarios" / "scenarios.yaml"


def env_true(name: str) -> bool:
    v = (os.getenv(name) or "").strip().lower()
    return v in ("1", "true", "yes", "y", "on")


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer: {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    password: str = DEFAULT_PASSWORD
    scenario_file: Path = DEFAULT_SCENARIO_FILE
    headless: bool = False
    channel: Optional[str] = None
    slow_mo_ms: int = 0
    timeout_ms: int = 30000
    nav_timeout_ms: int = 45000
    artifact_dir: Path = Path("artifacts")


def load_settings() -> Settings:
    """
    環境変数から設定を組み立てる。.env の読み込みは conftest 側（load_dotenv）。
    PW_HEADLESS 未指定なら CI に合わせる。
    """
    is_ci = env_true("CI")
    headless = env_true("PW_HEADLESS") if os.getenv("PW_HEADLESS") is not None else is_ci

    base_url = (os.getenv("SAUCE_BASE_URL") or DEFAULT_BASE_URL).strip()
    if not base_url.startswith(("http://", "https://")):
        raise ValueError(f"SAUCE_BASE_URL must be an http(s) URL: {base_url!r}")

    scenario_file = os.getenv("SCENARIO_FILE")

    return Settings(
        base_url=base_url,
        password=os.getenv("SAUCE_PASSWORD", DEFAULT_PASSWORD),
        scenario_file=Path(scenario_file) if scenario_file else DEFAULT_SCENARIO_FILE,
        headless=headless,
        channel=os.getenv("PW_CHANNEL") or None,
        slow_mo_ms=_env_int("PW_SLOWMO_MS", 0),
        timeout_ms=_env_int("PW_TIMEOUT_MS", 30000),
        nav_timeout_ms=_env_int("PW_NAV_TIMEOUT_MS", 45000),
        artifact_dir=Path(os.getenv("ARTIFACT_DIR", "artifacts")),
    )
