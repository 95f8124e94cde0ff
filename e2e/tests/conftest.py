import logging
from datetime import datetime

import pytest
from dotenv import load_dotenv
from playwright.sync_api import sync_playwright

from src.core.artifacts import safe_name
from src.core.config import load_settings
from src.core.scenario_loader import SUITE_IDS

logger = logging.getLogger(__name__)


def pytest_configure(config):
    # テストモジュールの収集時点（SCENARIO_FILE 参照）で .env が効いている必要がある
    load_dotenv()
    for suite in SUITE_IDS:
        config.addinivalue_line("markers", f"{suite}: {suite} suite scenarios")


@pytest.fixture(scope="session")
def settings():
    return load_settings()


@pytest.fixture(scope="session")
def pw():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def artifacts_base_dir(settings):
    base = settings.artifact_dir
    base.mkdir(parents=True, exist_ok=True)
    return base


@pytest.fixture(scope="session")
def browser(pw, settings):
    launch_kwargs = {
        "headless": settings.headless,
        "slow_mo": settings.slow_mo_ms,
    }
    if settings.channel:
        launch_kwargs["channel"] = settings.channel

    b = pw.chromium.launch(**launch_kwargs)
    yield b
    b.close()


@pytest.fixture()
def context(browser, settings):
    """
    テストごとに新規 context（cookie / storage を持ち越さない）
    """
    ctx = browser.new_context()
    ctx.set_default_timeout(settings.timeout_ms)
    ctx.set_default_navigation_timeout(settings.nav_timeout_ms)
    yield ctx
    ctx.close()


@pytest.fixture()
def page(context):
    p = context.new_page()
    yield p
    p.close()


@pytest.fixture()
def tracing_stop(request, context, artifacts_base_dir):
    """
    テストごとに trace を保存する。
    runner から保存先を渡されればそこへ、渡されなければ scenario_id 配下に日時付きで保存。
    """
    scenario_id = None
    callspec = getattr(request.node, "callspec", None)
    if callspec is not None:
        sc = callspec.params.get("sc")
        scenario_id = getattr(sc, "id", None)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    name = safe_name(scenario_id or request.node.name)
    out_dir = artifacts_base_dir / name
    out_dir.mkdir(parents=True, exist_ok=True)
    default_path = out_dir / f"trace_{name}_{ts}.zip"

    context.tracing.start(screenshots=True, snapshots=True, sources=True)
    stopped = False

    def _stop(path=None):
        nonlocal stopped
        if stopped:
            return
        stopped = True
        try:
            context.tracing.stop(path=str(path or default_path))
        except Exception:
            logger.warning("failed to save trace: %s", path or default_path, exc_info=True)

    yield _stop

    _stop()
