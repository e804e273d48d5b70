from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Tuple


@dataclass
class GeneratorConfig:
    # Output settings
    output_name: str = "uml.mmd"
    direction: str = "TB"                      # Mermaid layout: TB, BT, LR, RL
    indent: str = "\t"

    # Input selection
    source_extensions: Tuple[str, ...] = (".cs",)
    markup_extensions: Tuple[str, ...] = (".xaml",)

    # Heuristics
    interface_prefix: str = "I"                # prefix + upper-case letter marks an interface

    # Namespace-grouping variant
    group_namespaces: bool = False

    # Profiles merged on top of the defaults, in load order
    profiles: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def option_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.name != "profiles")

    def merged(self, overrides: Dict[str, Any]) -> "GeneratorConfig":
        """Return a copy with profile overrides applied; unknown keys are rejected."""
        unknown = sorted(set(overrides) - set(self.option_names()))
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
        values: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key.endswith("_extensions"):
                value = tuple(v if v.startswith(".") else "." + v for v in value)
            values[key] = value
        return replace(self, **values)


DEFAULT_CONFIG = GeneratorConfig()

__all__ = [
    "GeneratorConfig",
    "DEFAULT_CONFIG",
]
