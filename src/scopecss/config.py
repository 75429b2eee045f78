from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from scopecss.naming import DEFAULT_SUFFIX_LENGTH, ClassNameStrategy

_ENV_PREFIX = "SCOPECSS_"
_FALSEY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class ScopeCssConfig:
    prefix: str = "scopecss"
    global_prefix: str = "scopecss-global"
    class_name_strategy: ClassNameStrategy = ClassNameStrategy.RANDOM
    class_name_length: int = DEFAULT_SUFFIX_LENGTH
    strict: bool = True  # False: invalid sheets degrade to empty ones

    def __post_init__(self) -> None:
        if not self.prefix or not self.global_prefix:
            raise ValueError("Class name prefixes must be non-empty strings")
        object.__setattr__(
            self, "class_name_strategy", ClassNameStrategy(self.class_name_strategy)
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ScopeCssConfig:
        """Build a config from ``SCOPECSS_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}
        if env.get(f"{_ENV_PREFIX}PREFIX"):
            kwargs["prefix"] = env[f"{_ENV_PREFIX}PREFIX"]
        if env.get(f"{_ENV_PREFIX}GLOBAL_PREFIX"):
            kwargs["global_prefix"] = env[f"{_ENV_PREFIX}GLOBAL_PREFIX"]
        if env.get(f"{_ENV_PREFIX}CLASS_NAME_STRATEGY"):
            kwargs["class_name_strategy"] = ClassNameStrategy(
                env[f"{_ENV_PREFIX}CLASS_NAME_STRATEGY"].strip().lower()
            )
        if env.get(f"{_ENV_PREFIX}CLASS_NAME_LENGTH"):
            kwargs["class_name_length"] = int(env[f"{_ENV_PREFIX}CLASS_NAME_LENGTH"])
        if env.get(f"{_ENV_PREFIX}STRICT"):
            kwargs["strict"] = env[f"{_ENV_PREFIX}STRICT"].strip().lower() not in _FALSEY
        return cls(**kwargs)  # type: ignore[arg-type]
