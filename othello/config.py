# othello/config.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import os
import tomllib

# Positional weights, Black-positive. Corners > 100, X-squares most negative.
WEIGHTS = [
    [120, -20, 20,  5,  5, 20, -20, 120],
    [-20, -40, -5, -5, -5, -5, -40, -20],
    [ 20,  -5, 15,  3,  3, 15,  -5,  20],
    [  5,  -5,  3,  3,  3,  3,  -5,   5],
    [  5,  -5,  3,  3,  3,  3,  -5,   5],
    [ 20,  -5, 15,  3,  3, 15,  -5,  20],
    [-20, -40, -5, -5, -5, -5, -40, -20],
    [120, -20, 20,  5,  5, 20, -20, 120],
]

# tier -> search depth (plies) and presentation delay
DIFFICULTY_TIERS = {
    "easy":   {"depth": 1, "delay_ms": 1000},
    "normal": {"depth": 2, "delay_ms": 1500},
    "hard":   {"depth": 3, "delay_ms": 2000},
}

@dataclass
class EvalConfig:
    weights: List[List[int]] = field(default_factory=lambda: [row[:] for row in WEIGHTS])
    corner_threshold: int = 100   # a cell weighing more than this is a corner
    win_rate_scale: float = 100.0  # logistic temperature for score -> win rate

@dataclass
class AIConfig:
    tiers: Dict[str, Dict[str, int]] = field(
        default_factory=lambda: {k: dict(v) for k, v in DIFFICULTY_TIERS.items()}
    )
    default_difficulty: str = "normal"
    human_color: str = "black"  # side the human plays in PvE
    clear_best_margin: int = 50  # hard tier: best beats worst alternative by more than this
    seed: Optional[int] = None   # seed for the easy tier's random source

@dataclass
class UIConfig:
    engine_name: str = "Othello"
    api_port: int = 8000
    show_hints: bool = True

@dataclass
class Config:
    eval: EvalConfig = field(default_factory=EvalConfig)
    ai: AIConfig = field(default_factory=AIConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("eval", "ai", "ui"):
            if section in raw:
                target = getattr(cfg, section)
                for k, v in raw[section].items():
                    if hasattr(target, k):
                        setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = raw["log_level"]
        # partial tier overrides keep the defaults for untouched tiers
        for name, tier in DIFFICULTY_TIERS.items():
            merged = dict(tier)
            merged.update(cfg.ai.tiers.get(name, {}))
            cfg.ai.tiers[name] = merged
        return cfg

# read-only defaults shared by modules that are not handed a Config
CONFIG = Config.load_from_toml(os.environ.get("OTHELLO_CONFIG_TOML", "config.toml"))
if os.environ.get("OTHELLO_LOG_LEVEL"):
    CONFIG.log_level = os.environ["OTHELLO_LOG_LEVEL"].upper()
