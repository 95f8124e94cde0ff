from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping, Any, Tuple, Union

SuiteId = Literal["login", "products", "cart"]
StepKind = Literal["do", "expect"]


@dataclass(frozen=True)
class Step:
    kind: StepKind
    name: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # suite の setup は複数シナリオで共有されるので、params は読み取り専用にしておく
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __str__(self) -> str:
        return f"{self.kind}:{self.name}"


@dataclass(frozen=True)
class Blocked:
    """ログイン拒否：エラー表示にmessageが含まれる"""
    message: str

    def expectation(self) -> Step:
        return Step(kind="expect", name="blocked", params={"message": self.message})


@dataclass(frozen=True)
class Admitted:
    """ログイン成功：URLにlocationが含まれる"""
    location: str

    def expectation(self) -> Step:
        return Step(kind="expect", name="admitted", params={"location": self.location})


LoginOutcome = Union[Blocked, Admitted]


@dataclass(frozen=True)
class Scenario:
    id: str
    suite: SuiteId
    name: str
    setup: Tuple[Step, ...] = ()
    body: Tuple[Step, ...] = ()
