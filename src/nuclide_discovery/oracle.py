from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

from nuclide_discovery.elements import CATALOG, ElementCatalog
from nuclide_discovery.isotopes import DEFAULT_STABLE_ISOTOPES


# |N - N_target| <= 1. Не параметр, а фиксированная ширина трубки стабильности.
STABILITY_WINDOW = 1


@dataclass
class ValleyRow:
    Z: int
    symbol: str
    targets: List[int]
    explicit: bool


class StabilityOracle:
    """
    "Reality" side of the simulation.

    Two tiers:
      1. explicit stable-isotope anchors for Z, when the list is non-empty;
      2. otherwise a single N from the approximate valley-of-stability curve.

    A nucleus is reality-stable if Z is a known element and N lies within
    STABILITY_WINDOW of some target.
    """

    def __init__(
        self,
        stable_isotopes: Optional[Mapping[int, Sequence[int]]] = None,
        catalog: Optional[ElementCatalog] = None,
    ) -> None:
        source = DEFAULT_STABLE_ISOTOPES if stable_isotopes is None else stable_isotopes
        self.stable_isotopes = {int(z): tuple(int(n) for n in ns) for z, ns in source.items()}
        self.catalog = catalog if catalog is not None else CATALOG

    def approximate_stable_n(self, Z: int) -> int:
        """
        Кусочно-линейная кривая N/Z для долины стабильности:
          Z <= 20       : 1.0
          20 < Z <= 40  : 1.0 -> 1.2
          40 < Z <= 60  : 1.2 -> 1.32
          60 < Z <= 82  : 1.32 -> 1.45
          Z > 82        : 1.5
        N = round(ratio * Z) (половина округляется вверх), нечётное N сдвигается на +1.
        """
        if Z <= 0:
            return 0

        if Z <= 20:
            ratio = 1.0
        elif Z <= 40:
            t = (Z - 20) / 20.0
            ratio = 1.0 + 0.2 * t
        elif Z <= 60:
            t = (Z - 40) / 20.0
            ratio = 1.2 + 0.12 * t
        elif Z <= 82:
            t = (Z - 60) / 22.0
            ratio = 1.32 + 0.13 * t
        else:
            ratio = 1.5

        n = int(math.floor(ratio * Z + 0.5))
        # even-N bias: even-even nuclei bind more strongly
        if n % 2 == 1:
            n += 1
        return n

    def target_neutron_counts(self, Z: int) -> List[int]:
        explicit = self.stable_isotopes.get(Z)
        if explicit:
            return list(explicit)
        approx_n = self.approximate_stable_n(Z)
        if approx_n <= 0:
            return []
        return [approx_n]

    def is_reality_stable(self, Z: int, N: int) -> bool:
        if Z not in self.catalog:
            return False

        targets = self.target_neutron_counts(Z)
        if not targets:
            return False

        best_diff = min(abs(N - t) for t in targets)
        return best_diff <= STABILITY_WINDOW

    def nearest_stable_n(self, Z: int, N: int) -> Optional[int]:
        targets = sorted(self.target_neutron_counts(Z))
        if not targets:
            return None

        # Линейный проход по возрастанию: при равенстве остаётся первое (меньшее) N.
        best = targets[0]
        best_diff = abs(N - best)
        for t in targets[1:]:
            d = abs(N - t)
            if d < best_diff:
                best_diff = d
                best = t
        return best

    def valley_table(self, z_min: int = 1, z_max: int = 118) -> List[ValleyRow]:
        rows: List[ValleyRow] = []
        for Z in range(max(1, z_min), z_max + 1):
            element = self.catalog.lookup(Z)
            if element is None:
                continue
            rows.append(
                ValleyRow(
                    Z=Z,
                    symbol=element.symbol,
                    targets=self.target_neutron_counts(Z),
                    explicit=bool(self.stable_isotopes.get(Z)),
                )
            )
        return rows
