from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List
import yaml

from .hints import SolvingTechnique
from .techniques.registry import DEFAULT_FINDERS

DEFAULT_TECHNIQUES = [technique.key for technique, _ in DEFAULT_FINDERS]
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


@dataclass
class SolverConfig:
    techniques: List[str] = field(default_factory=lambda: list(DEFAULT_TECHNIQUES))
    brute_force: bool = True   # run backtracking once the hint solver stalls
    forward: bool = True       # candidate order for backtracking
    log_level: str = "INFO"

    def __post_init__(self):
        for key in self.techniques:
            SolvingTechnique.from_key(key)  # raises ValueError on unknown keys
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"invalid log_level '{self.log_level}', expected one of {LOG_LEVELS}")

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "SolverConfig":
        known = {k: v for k, v in cfg.items() if k in cls.__dataclass_fields__ and v is not None}
        return cls(**known)


def load_config(path: str | Path | None = None, **overrides) -> SolverConfig:
    """YAML file (optional) + CLI overrides (None = keep file / default value)."""
    cfg = load_yaml(path) if path else DotDict()
    return SolverConfig.from_dict(merge_overrides(cfg, **overrides))
