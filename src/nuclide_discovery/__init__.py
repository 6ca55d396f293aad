from __future__ import annotations

from nuclide_discovery.config import SimulationConfig, load_simulation_config
from nuclide_discovery.elements import ALL_ELEMENTS, CATALOG, ElementCatalog, ElementDef
from nuclide_discovery.engine import EngineParams, InnerEngine, StepResult
from nuclide_discovery.judge import Judge, JudgeVerdict
from nuclide_discovery.nucleus import Nucleus
from nuclide_discovery.oracle import StabilityOracle
from nuclide_discovery.session import DiscoverySession, SessionStats

__all__ = [
    "ALL_ELEMENTS",
    "CATALOG",
    "DiscoverySession",
    "ElementCatalog",
    "ElementDef",
    "EngineParams",
    "InnerEngine",
    "Judge",
    "JudgeVerdict",
    "Nucleus",
    "SessionStats",
    "SimulationConfig",
    "StabilityOracle",
    "StepResult",
    "load_simulation_config",
]
