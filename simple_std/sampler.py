"""Batch draws summarised as a JSON-ready report."""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from .prng import Xorshift128Plus, check_range, random_float, random_int_range

DRAW_KINDS = ("int", "float")


@dataclass
class DrawConfig:
    """Configuration for one batch of draws."""

    seed: Optional[int] = None  # None draws from the shared clock-seeded generator
    count: int = 10
    start: int = 0
    end: int = 100
    kind: str = "int"


def _draw_function(cfg: DrawConfig):
    if cfg.seed is None:
        if cfg.kind == "float":
            return random_float
        return lambda: random_int_range(cfg.start, cfg.end)

    rng = Xorshift128Plus.from_seed(cfg.seed)
    if cfg.kind == "float":
        return rng.random
    return lambda: rng.randrange(cfg.start, cfg.end)


def run_draws(cfg: DrawConfig) -> Dict[str, Any]:
    """Draw ``cfg.count`` values and summarise them."""

    if cfg.kind not in DRAW_KINDS:
        raise ValueError(f"kind must be one of {DRAW_KINDS}, got {cfg.kind!r}")
    if cfg.count < 0:
        raise ValueError(f"count must be non-negative, got {cfg.count}")

    draw = _draw_function(cfg)
    if cfg.kind == "int":
        check_range(cfg.start, cfg.end)

    values: List[Any] = [draw() for _ in range(cfg.count)]

    summary: Dict[str, Any] = {
        "count": len(values),
        "min": min(values) if values else None,
        "max": max(values) if values else None,
        "mean": round(sum(values) / len(values), 6) if values else None,
        "distinct": len(set(values)),
    }
    report: Dict[str, Any] = {
        "config": asdict(cfg),
        "summary": summary,
        "values": values,
    }
    if cfg.kind == "int":
        hits = Counter(values)
        report["histogram"] = {str(value): hits[value] for value in sorted(hits)}
    return report
