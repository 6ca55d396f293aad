from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Nucleus:
    """Одна конфигурация (Z, N). Каждое движение движка порождает новое значение."""

    protons: int
    neutrons: int

    @property
    def mass_number(self) -> int:
        return self.protons + self.neutrons

    def key(self) -> tuple[int, int]:
        return (self.protons, self.neutrons)
