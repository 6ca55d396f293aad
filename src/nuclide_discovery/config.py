from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping

import json

import yaml

from nuclide_discovery.engine import EngineParams


_SECTIONS = ("engine", "session")


def _coerce(name: str, value: Any, default: Any) -> Any:
    """Приводит значение к типу поля; "false" для bool и 2.9 для int отклоняются."""
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ValueError(f"{name} must be a boolean, got {value!r}")
        return value
    if isinstance(default, int):
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        return value
    if isinstance(default, float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a number, got {value!r}")
        return float(value)
    return str(value)


@dataclass
class SimulationConfig:
    seed: int = 42
    max_z: int = 118
    ticks: int = 1000
    history_limit: int = 120
    # True: судья оценивает каждый тик; False: только заявленные движком ядра.
    judge_unclaimed: bool = True

    local_step_max: int = 2
    valley_move_prob: float = 0.15
    global_jump_prob: float = 0.05
    base_tolerance: float = 2.0
    tolerance_slope: float = 0.10

    experiment_name: str = "default"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.max_z < 1:
            raise ValueError(f"max_z must be >= 1, got {self.max_z}")
        if self.ticks < 0:
            raise ValueError(f"ticks must be >= 0, got {self.ticks}")
        if self.history_limit < 1:
            raise ValueError(f"history_limit must be >= 1, got {self.history_limit}")
        if self.local_step_max < 0:
            raise ValueError(f"local_step_max must be >= 0, got {self.local_step_max}")
        for name in ("valley_move_prob", "global_jump_prob"):
            p = float(getattr(self, name))
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1], got {p}")
        if self.valley_move_prob + self.global_jump_prob > 1.0:
            raise ValueError("valley_move_prob + global_jump_prob must not exceed 1")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimulationConfig":
        """
        Собирает конфиг из словаря с необязательными секциями engine: / session:.
        Плоские ключи приоритетнее секций. Неизвестные ключи — ошибка.
        """
        merged: Dict[str, Any] = {}

        for section in _SECTIONS:
            section_dict = data.get(section, {})
            if isinstance(section_dict, Mapping):
                merged.update(section_dict)

        for key, value in data.items():
            if key not in _SECTIONS:
                merged[key] = value

        allowed = {f.name: f for f in fields(cls)}
        unknown = [k for k in merged if k not in allowed]
        if unknown:
            raise ValueError(f"Unknown simulation config keys: {unknown}")

        base = cls()
        kwargs: Dict[str, Any] = {}
        for name in allowed:
            default = getattr(base, name)
            value = merged.get(name, default)
            kwargs[name] = _coerce(name, value, default)
        return cls(**kwargs)

    def to_engine_params(self) -> EngineParams:
        return EngineParams(
            local_step_max=self.local_step_max,
            valley_move_prob=self.valley_move_prob,
            global_jump_prob=self.global_jump_prob,
            base_tolerance=self.base_tolerance,
            tolerance_slope=self.tolerance_slope,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _load_dict(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Simulation config not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)

    if not isinstance(data, dict):
        raise ValueError(f"Simulation config {path} must contain a mapping at top level")
    return data


def load_simulation_config(path: str | Path) -> SimulationConfig:
    return SimulationConfig.from_dict(_load_dict(Path(path)))
