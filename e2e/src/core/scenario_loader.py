from __future__ import annotations

from pathlib import Path
from typing import List, Any, Dict, Tuple

import yaml

from .config import DEFAULT_SCENARIO_FILE
from .types import Scenario, Step, Blocked, Admitted, LoginOutcome

SUITE_IDS = ("login", "products", "cart")


def load_scenarios(path: str | Path = DEFAULT_SCENARIO_FILE) -> List[Scenario]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Scenario file not found: {p.resolve()}")

    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("scenarios.yaml must be a mapping")

    out: List[Scenario] = []
    if "login" in raw:
        out.extend(login_scenarios(raw["login"]))

    suites = raw.get("suites") or []
    if not isinstance(suites, list):
        raise ValueError("'suites' must be a list")
    for s in suites:
        if not isinstance(s, dict):
            raise ValueError("Each suite must be a dict")
        out.extend(_suite_scenarios(s))

    seen = set()
    for sc in out:
        if sc.id in seen:
            raise ValueError(f"Duplicate scenario id: {sc.id}")
        seen.add(sc.id)
    return out


def login_scenarios(d: Dict[str, Any]) -> List[Scenario]:
    """
    username -> 期待結果 の表から、ユーザーごとに1シナリオを生成する。
    表の順番どおりに並ぶ。
    """
    if not isinstance(d, dict):
        raise ValueError("'login' must be a dict")
    outcomes = d.get("outcomes")
    if not isinstance(outcomes, dict) or not outcomes:
        raise ValueError("login.outcomes must be a non-empty mapping")

    setup = _to_steps(d.get("setup"), where="login.setup")

    out: List[Scenario] = []
    for username, spec in outcomes.items():
        outcome = to_outcome(str(username), spec)
        out.append(
            Scenario(
                id=f"login_{username}",
                suite="login",
                name=f"should handle login attempt for {username}",
                setup=setup,
                body=(
                    Step(kind="do", name="login", params={"username": str(username)}),
                    outcome.expectation(),
                ),
            )
        )
    return out


def to_outcome(username: str, spec: Any) -> LoginOutcome:
    if not isinstance(spec, dict) or len(spec) != 1:
        raise ValueError(f"Outcome for {username} must have exactly one of 'blocked' / 'admitted': {spec}")
    kind, value = next(iter(spec.items()))
    if kind not in ("blocked", "admitted"):
        raise ValueError(f"Unknown outcome for {username}: {spec}")
    # `blocked:` だけ書いて値が空のまま、を str(None) で通さない
    if value is None or not str(value).strip():
        raise ValueError(f"Outcome '{kind}' for {username} needs a non-empty value")
    if kind == "blocked":
        return Blocked(message=str(value))
    return Admitted(location=str(value))


def _suite_scenarios(d: Dict[str, Any]) -> List[Scenario]:
    suite = d.get("id")
    if suite not in SUITE_IDS:
        raise ValueError(f"Unknown suite id: {suite!r} (expected one of {SUITE_IDS})")

    setup = _to_steps(d.get("setup"), where=f"{suite}.setup")
    cases = d.get("cases")
    if not isinstance(cases, list) or not cases:
        raise ValueError(f"{suite}.cases must be a non-empty list")

    out: List[Scenario] = []
    for c in cases:
        if not isinstance(c, dict):
            raise ValueError(f"Each case must be a dict: {suite}")
        for k in ("id", "name", "body"):
            if k not in c:
                raise ValueError(f"Missing key '{k}' in case: {c}")
        out.append(
            Scenario(
                id=f"{suite}_{c['id']}",
                suite=suite,
                name=str(c["name"]),
                setup=setup,
                body=_to_steps(c["body"], where=f"{suite}.{c['id']}.body"),
            )
        )
    return out


def _to_steps(rows: Any, where: str) -> Tuple[Step, ...]:
    if rows is None:
        return ()
    if not isinstance(rows, list):
        raise ValueError(f"{where} must be a list")
    return tuple(_to_step(r, where) for r in rows)


def _to_step(row: Any, where: str) -> Step:
    # 例: {do: add_to_cart, product: sauce-labs-backpack} / {expect: cart_badge, text: "1"}
    if not isinstance(row, dict):
        raise ValueError(f"Each step must be a dict: {where}")
    kinds = [k for k in ("do", "expect") if k in row]
    if len(kinds) != 1:
        raise ValueError(f"Step must have exactly one of 'do' / 'expect' in {where}: {row}")
    kind = kinds[0]
    params = {str(k): v for k, v in row.items() if k != kind}
    return Step(kind=kind, name=str(row[kind]), params=params)
