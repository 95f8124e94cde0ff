from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from playwright.sync_api import Page

logger = logging.getLogger(__name__)


def safe_name(s: str) -> str:
    s = re.sub(r"[^a-zA-Z0-9_.-]+", "_", s or "")
    s = s.strip("_")
    return s[:120] if s else "artifact"


@dataclass
class Artifacts:
    base_dir: Path
    scenario_id: str

    @property
    def out_dir(self) -> Path:
        d = self.base_dir / safe_name(self.scenario_id)
        d.mkdir(parents=True, exist_ok=True)
        return d

    def path(self, filename: str) -> Path:
        return self.out_dir / filename

    def save_debug(self, page: Page, prefix: str) -> None:
        prefix = safe_name(prefix)
        # 失敗時の証跡なので、ここで落ちても元の例外を優先する
        try:
            page.screenshot(path=str(self.path(f"{prefix}.png")), full_page=True)
        except Exception:
            logger.debug("screenshot failed: %s/%s", self.scenario_id, prefix, exc_info=True)
        try:
            html = page.content()
            self.path(f"{prefix}.html").write_text(html, encoding="utf-8")
        except Exception:
            logger.debug("html dump failed: %s/%s", self.scenario_id, prefix, exc_info=True)
