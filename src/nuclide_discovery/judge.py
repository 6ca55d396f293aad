from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set

from nuclide_discovery.elements import ElementCatalog, ElementDef
from nuclide_discovery.nucleus import Nucleus
from nuclide_discovery.oracle import StabilityOracle


@dataclass(frozen=True)
class JudgeVerdict:
    nucleus: Nucleus
    engine_claimed_stable: bool
    reality_stable: bool
    in_catalog: bool
    matched_element: Optional[ElementDef]
    nearest_stable_n: Optional[int]
    is_correct: bool  # claimed AND reality_stable AND in_catalog


class Judge:
    """
    Outer "judge": compares the engine's claims with the oracle.

    discovered_z grows whenever a reality-stable nucleus of a catalog element
    is evaluated, whoever claimed what. It only shrinks through reset().
    """

    def __init__(
        self,
        oracle: Optional[StabilityOracle] = None,
        catalog: Optional[ElementCatalog] = None,
    ) -> None:
        self.oracle = oracle if oracle is not None else StabilityOracle(catalog=catalog)
        self.catalog = catalog if catalog is not None else self.oracle.catalog
        self.discovered_z: Set[int] = set()

    def is_in_catalog(self, Z: int) -> bool:
        return Z in self.catalog

    def evaluate(self, nucleus: Nucleus, engine_claimed_stable: bool) -> JudgeVerdict:
        Z = nucleus.protons
        N = nucleus.neutrons

        in_catalog = self.is_in_catalog(Z)
        reality_stable = self.oracle.is_reality_stable(Z, N)
        element = self.catalog.lookup(Z) if in_catalog else None
        nearest = self.oracle.nearest_stable_n(Z, N) if in_catalog else None

        claimed = bool(engine_claimed_stable)
        is_correct = claimed and reality_stable and in_catalog

        if reality_stable and in_catalog:
            self.discovered_z.add(Z)

        return JudgeVerdict(
            nucleus=nucleus,
            engine_claimed_stable=claimed,
            reality_stable=reality_stable,
            in_catalog=in_catalog,
            matched_element=element,
            nearest_stable_n=nearest,
            is_correct=is_correct,
        )

    def reset(self) -> None:
        self.discovered_z.clear()

    def discovered_elements(self) -> List[ElementDef]:
        return [e for e in self.catalog.all() if e.Z in self.discovered_z]
