"""Solver tuning parameters.

The weights and caps were picked by hand and have not been calibrated;
load overrides from a JSON file rather than editing the defaults.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SolverSettings:
    # Weighted A*: priority = g + weight * h, weight switching past a depth.
    weight_near: float = 1.1
    weight_far: float = 1.3
    weight_switch_depth: int = 30

    # Expansion caps per strategy.
    weighted_iteration_cap: int = 500_000
    greedy_iteration_cap: int = 200_000
    bidirectional_iteration_cap: int = 800_000

    # Wall-clock budget (seconds) for all IDA* threshold passes together.
    ida_time_budget: float = 12.0
    # IDA* reads the clock once per this many recursive calls.
    deadline_check_interval: int = 1024

    def __post_init__(self) -> None:
        for name in (
            "weighted_iteration_cap",
            "greedy_iteration_cap",
            "bidirectional_iteration_cap",
            "deadline_check_interval",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive.")
        if self.ida_time_budget <= 0:
            raise ValueError("ida_time_budget must be positive.")
        if self.weight_near < 1 or self.weight_far < 1:
            raise ValueError("Heuristic weights must be at least 1.")

    def weight_for(self, g: int) -> float:
        return self.weight_far if g > self.weight_switch_depth else self.weight_near

    # -- persistence ----------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolverSettings:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown solver settings: {', '.join(unknown)}.")
        return cls(**data)

    @classmethod
    def from_file(cls, filepath: Path) -> SolverSettings:
        """Load settings from a JSON object; missing keys keep their defaults."""
        data = json.loads(Path(filepath).read_text())
        if not isinstance(data, dict):
            raise ValueError(f"{filepath}: expected a JSON object.")
        return cls.from_dict(data)

    def save(self, filepath: Path) -> None:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(json.dumps(asdict(self), indent=2) + "\n")


DEFAULT_SETTINGS = SolverSettings()
