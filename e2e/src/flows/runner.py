# e2e/src/flows/runner.py
from __future__ import annotations

import inspect
import logging
from pathlib import Path
from typing import Callable, Dict, List, Tuple

from playwright.sync_api import Page

from src.core.types import Scenario, Step
from src.core.config import Settings
from src.core.artifacts import Artifacts
from src.flows.steps import STEPS, StepFn, resolve

logger = logging.getLogger(__name__)


def plan(sc: Scenario, registry: Dict[str, Dict[str, StepFn]] = STEPS) -> List[Tuple[str, Step, StepFn]]:
    """
    setup → body の順に並べ、全ステップを先に解決しておく。
    未知のステップ・引数の過不足は実行前に ValueError（ブラウザ操作は一切しない）。
    """
    out = []
    for phase, steps in (("setup", sc.setup), ("body", sc.body)):
        for step in steps:
            fn = resolve(step, registry)
            try:
                inspect.signature(fn).bind(None, None, **step.params)
            except TypeError as e:
                raise ValueError(f"Bad params for {step} in {sc.id}: {e}") from None
            out.append((phase, step, fn))
    return out


def run_scenario(
    sc: Scenario,
    page: Page,
    settings: Settings,
    artifacts_base_dir: Path,
    tracing_stop: Callable[[str], None],
    registry: Dict[str, Dict[str, StepFn]] = STEPS,
) -> None:
    """
    tracing_stop は conftest から渡される関数。
    scenario_id ごとに trace.zip を保存する。
    失敗（AssertionError / TimeoutError）は証跡を残してそのまま投げ直す。
    """
    artifacts = Artifacts(base_dir=artifacts_base_dir, scenario_id=sc.id)

    try:
        steps = plan(sc, registry)
    except ValueError:
        artifacts.save_debug(page, "unknown_step")
        tracing_stop(str(artifacts.path("trace.zip")))
        raise

    try:
        for i, (phase, step, fn) in enumerate(steps):
            logger.debug("[%s] %s #%d %s %s", sc.id, phase, i, step, step.params)
            try:
                fn(page, settings, **step.params)
            except Exception:
                logger.warning("[%s] failed at %s #%d %s", sc.id, phase, i, step)
                artifacts.save_debug(page, f"failed_{phase}_{i}_{step.name}")
                raise
    finally:
        # trace保存（必ず）
        tracing_stop(str(artifacts.path("trace.zip")))
