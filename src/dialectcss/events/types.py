"""Event types emitted by the compile pipeline and the coordinator."""

from dataclasses import dataclass

from dialectcss.model.rules import RuleMap


@dataclass(frozen=True)
class InputChanged:
    length: int


@dataclass(frozen=True)
class StylesParsed:
    """Rules parsed from the input, for reading values back into edit controls."""

    rules: RuleMap
    warning_count: int
    cached: bool

    @property
    def rule_count(self) -> int:
        return len(self.rules)


@dataclass(frozen=True)
class StylesheetCompiled:
    canonical: str
    applied: bool


@dataclass(frozen=True)
class DecorationsReconciled:
    added: tuple[str, ...]
    removed: tuple[str, ...]
    changed: tuple[str, ...]


@dataclass(frozen=True)
class DecorationsCleared:
    removed: int


@dataclass(frozen=True)
class CoordinatorActivated:
    reason: str


@dataclass(frozen=True)
class CoordinatorIdled:
    idle_seconds: float
