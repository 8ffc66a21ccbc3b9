from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class CompilerConfig:
    debounce_seconds: float = 0.3
    idle_timeout_seconds: float = 3.0
    cache_size: int = 10
    use_important: bool = True
    minify: bool = False
    add_comments: bool = False
    indent_size: int = 2
    overlay_edge_distance: str = "30px"
    overlay_z_index: str = "10"
    history_size: int = 50

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> CompilerConfig:
        """Build a config from a plain dict, ignoring unknown keys."""
        if not mapping:
            return cls()
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in mapping:
                continue
            kwargs[f.name] = _coerce(mapping[f.name], type(getattr(cls, f.name)))
        return cls(**kwargs)


def _coerce(value: Any, target: type) -> Any:
    if target is bool:
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes", "on")
        return bool(value)
    if target is int:
        return int(value)
    if target is float:
        return float(value)
    return str(value)
