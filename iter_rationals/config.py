"""Settings for the demo entry point, read from a TOML parfile."""
from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .enumerator import DEFAULT_INTEGER_TYPE
from .integers import resolve_integer_type

DEFAULT_COUNT = 20


def _non_negative_int(params: Mapping[str, Any], key: str, default: int) -> int:
    value = params.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{key} must be non-negative, got {value}")
    return value


@dataclass(frozen=True)
class DemoConfig:
    count: int = DEFAULT_COUNT
    integer_type: str = DEFAULT_INTEGER_TYPE
    skip: int = 0

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "DemoConfig":
        """Build a config from parfile parameters; unknown keys are ignored."""
        integer_type = params.get("integer_type", DEFAULT_INTEGER_TYPE)
        if not isinstance(integer_type, str):
            raise ValueError(f"integer_type must be a string, got {integer_type!r}")
        resolve_integer_type(integer_type)
        return cls(
            count=_non_negative_int(params, "count", DEFAULT_COUNT),
            integer_type=integer_type,
            skip=_non_negative_int(params, "skip", 0),
        )

    @classmethod
    def from_parfile(cls, path: Union[str, Path]) -> "DemoConfig":
        with open(path, "rb") as f:
            params = tomllib.load(f)
        return cls.from_mapping(params)

    def override(
        self,
        *,
        count: Optional[int] = None,
        integer_type: Optional[str] = None,
        skip: Optional[int] = None,
    ) -> "DemoConfig":
        """Return a copy with every non-``None`` argument replaced."""
        changes = {
            key: value
            for key, value in (("count", count), ("integer_type", integer_type), ("skip", skip))
            if value is not None
        }
        if not changes:
            return self
        return type(self).from_mapping({**asdict(self), **changes})


def load_config(parfile: Optional[Union[str, Path]] = None) -> DemoConfig:
    if parfile is None:
        return DemoConfig()
    return DemoConfig.from_parfile(parfile)
