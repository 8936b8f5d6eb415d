# ataxx/config.py
from dataclasses import dataclass, field
from typing import Optional
import os
import tomllib  # python >=3.11


@dataclass
class SearchConfig:
    depth: int = 4
    seed: Optional[int] = None  # None seeds from system entropy
    show_info: bool = False  # print an info line after each search


@dataclass
class EvalConfig:
    pass_penalty: int = 10
    winning_value: int = 900000  # must dominate any piece difference


@dataclass
class UIConfig:
    prompt: str = "ataxx: "
    legend: bool = True
    red_player: str = "manual"  # "manual" or "auto"
    blue_player: str = "auto"


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
        return cfg


def apply_env_overrides(cfg: Config, environ=os.environ) -> Config:
    """Apply ATAXX_SEARCH_DEPTH and ATAXX_SEED; malformed values are ignored."""
    try:
        override_depth = environ.get("ATAXX_SEARCH_DEPTH")
        if override_depth:
            cfg.search.depth = int(override_depth)
    except ValueError:
        pass
    try:
        override_seed = environ.get("ATAXX_SEED")
        if override_seed:
            cfg.search.seed = int(override_seed)
    except ValueError:
        pass
    return cfg


# single globally importable config instance
CONFIG = apply_env_overrides(
    Config.load_from_toml(os.environ.get("ATAXX_CONFIG_TOML", "config.toml")))
