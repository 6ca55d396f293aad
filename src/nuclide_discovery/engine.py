"""
engine.py — внутренний "физический" движок.

Движок знает только Z и N. Он блуждает по плоскости (Z, N), смешивая
три типа ходов, и по собственному (намеренно неточному) правилу решает,
какие конфигурации он считает стабильными:

  - локальный случайный шаг (большую часть времени);
  - шаг к своей долине стабильности (иногда);
  - глобальный прыжок в новую область (редко).

Пары (Z, N), которые судья подтвердил как верные, запоминаются, и движок
старается туда не возвращаться.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Set, Tuple

import numpy as np

from nuclide_discovery.nucleus import Nucleus


MAX_REVISIT_RETRIES = 5
RESET_Z_CAP = 128
JUMP_Z_CAP = 140
JUMP_N_NOISE = 4


@dataclass
class EngineParams:
    local_step_max: int = 2  # максимальный |dZ|, |dN| локального шага
    valley_move_prob: float = 0.15
    global_jump_prob: float = 0.05
    base_tolerance: float = 2.0
    tolerance_slope: float = 0.10


@dataclass(frozen=True)
class StepResult:
    nucleus: Nucleus
    engine_claimed_stable: bool


class InnerEngine:
    def __init__(
        self,
        params: Optional[EngineParams] = None,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        initial_z: int = 1,
        initial_n: int = 0,
    ) -> None:
        self.params = params if params is not None else EngineParams()
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._solved: Set[Tuple[int, int]] = set()
        self._state = Nucleus(protons=max(1, int(initial_z)), neutrons=max(0, int(initial_n)))

    @property
    def state(self) -> Nucleus:
        return self._state

    # --- solved states ---

    def mark_solved(self, nucleus: Nucleus) -> None:
        """Called by the orchestrator once the judge confirms a correct claim."""
        self._solved.add(nucleus.key())

    def clear_solved(self) -> None:
        self._solved.clear()

    def is_solved(self, Z: int, N: int) -> bool:
        return (Z, N) in self._solved

    @property
    def solved_count(self) -> int:
        return len(self._solved)

    def reset(self, max_z: int) -> None:
        self._solved.clear()
        z_span = min(max(int(max_z), 1), RESET_Z_CAP)
        n_span = max(2 * int(max_z), 1)
        z = 1 + int(self._rng.integers(0, z_span))
        n = int(self._rng.integers(0, n_span))
        self._state = Nucleus(protons=z, neutrons=n)

    # --- the engine's private valley ---

    def target_ratio(self, Z: int) -> float:
        """
        Собственное представление движка о N/Z:
          Z <= 20 : 1.0 + 0.01*Z  (1.0 -> 1.2)
          Z >= 82 : 1.55
          иначе   : линейно между (20, 1.2) и (82, 1.55)
        """
        if Z <= 0:
            return 1.0
        if Z <= 20:
            return 1.0 + 0.01 * Z
        if Z >= 82:
            return 1.55
        r20 = 1.2
        r82 = 1.55
        t = (Z - 20) / (82 - 20)
        return r20 + (r82 - r20) * t

    def target_n(self, Z: int) -> int:
        n = int(math.floor(self.target_ratio(Z) * Z + 0.5))
        return max(n, 0)

    def thinks_stable(self, Z: int, N: int) -> bool:
        if Z <= 0 or N <= 0:
            return False
        target = self.target_ratio(Z) * Z
        tol = self.params.base_tolerance + self.params.tolerance_slope * Z
        return abs(N - target) <= tol

    # --- moves ---

    def step(self, max_z: int) -> StepResult:
        p = self.params
        r = float(self._rng.random())

        if r < p.global_jump_prob:
            self._global_jump(max_z)
        elif r < p.global_jump_prob + p.valley_move_prob:
            self._valley_move(max_z)
        else:
            self._local_move(max_z)

        s = self._state
        return StepResult(nucleus=s, engine_claimed_stable=self.thinks_stable(s.protons, s.neutrons))

    def _clamp(self, Z: int, N: int, max_z: int) -> Tuple[int, int]:
        z_hi = max(max_z + 10, 1)
        n_hi = z_hi * 3
        Z = min(max(Z, 1), z_hi)
        N = min(max(N, 0), n_hi)
        return Z, N

    def _nudge_off_solved(self, Z: int, N: int, max_z: int) -> Tuple[int, int]:
        tries = 0
        while tries < MAX_REVISIT_RETRIES and (Z, N) in self._solved:
            Z += 1 if self._rng.integers(0, 2) else -1
            N += int(self._rng.integers(-1, 2))
            Z, N = self._clamp(Z, N, max_z)
            tries += 1
        return Z, N

    def _local_move(self, max_z: int) -> None:
        k = int(self.params.local_step_max)
        dZ = int(self._rng.integers(-k, k + 1))
        dN = int(self._rng.integers(-k, k + 1))
        if dZ == 0 and dN == 0:
            dZ = 1

        Z, N = self._clamp(self._state.protons + dZ, self._state.neutrons + dN, max_z)
        Z, N = self._nudge_off_solved(Z, N, max_z)
        self._state = Nucleus(protons=Z, neutrons=N)

    def _valley_move(self, max_z: int) -> None:
        Z, N = self._clamp(self._state.protons, self._state.neutrons, max_z)
        target = self.target_n(Z)

        if N < target:
            N += 1
        elif N > target:
            N -= 1
        else:
            # уже на долине: скользим вдоль неё по Z
            Z += 1 if self._rng.integers(0, 2) else -1

        Z, N = self._clamp(Z, N, max_z)
        Z, N = self._nudge_off_solved(Z, N, max_z)
        self._state = Nucleus(protons=Z, neutrons=N)

    def _draw_jump(self, max_z: int) -> Tuple[int, int]:
        z_span = min(max(max_z + 10, 2), JUMP_Z_CAP)
        Z = 1 + int(self._rng.integers(0, z_span))
        N = self.target_n(Z) + int(self._rng.integers(-JUMP_N_NOISE, JUMP_N_NOISE + 1))
        return self._clamp(Z, N, max_z)

    def _global_jump(self, max_z: int) -> None:
        Z, N = self._draw_jump(max_z)
        tries = 0
        while tries < MAX_REVISIT_RETRIES and (Z, N) in self._solved:
            Z, N = self._draw_jump(max_z)
            tries += 1
        self._state = Nucleus(protons=Z, neutrons=N)
