from __future__ import annotations

from nuclide_discovery.elements import CATALOG
from nuclide_discovery.engine import InnerEngine
from nuclide_discovery.judge import Judge
from nuclide_discovery.nucleus import Nucleus
from nuclide_discovery.oracle import StabilityOracle


def test_correct_claim_on_carbon_12() -> None:
    judge = Judge()
    v = judge.evaluate(Nucleus(6, 6), True)
    assert v.in_catalog and v.reality_stable and v.is_correct
    assert v.matched_element is not None and v.matched_element.symbol == "C"
    assert v.nearest_stable_n == 6
    assert judge.discovered_z == {6}


def test_discovery_tracks_reality_not_the_claim() -> None:
    judge = Judge()
    v = judge.evaluate(Nucleus(26, 30), False)
    assert v.reality_stable and not v.is_correct
    assert 26 in judge.discovered_z


def test_wrong_claim_is_not_correct() -> None:
    judge = Judge()
    v = judge.evaluate(Nucleus(6, 20), True)
    assert not v.reality_stable and not v.is_correct
    assert v.nearest_stable_n == 7
    assert judge.discovered_z == set()


def test_outside_catalog() -> None:
    judge = Judge()
    v = judge.evaluate(Nucleus(125, 190), True)
    assert not v.in_catalog and not v.reality_stable and not v.is_correct
    assert v.matched_element is None
    assert v.nearest_stable_n is None
    assert judge.discovered_z == set()


def test_evaluate_is_idempotent() -> None:
    judge = Judge()
    first = judge.evaluate(Nucleus(8, 8), True)
    snapshot = set(judge.discovered_z)
    second = judge.evaluate(Nucleus(8, 8), True)
    assert first == second
    assert judge.discovered_z == snapshot == {8}


def test_reset_and_clear_hooks() -> None:
    judge = Judge()
    judge.evaluate(Nucleus(1, 0), True)
    judge.evaluate(Nucleus(2, 2), False)
    assert [e.symbol for e in judge.discovered_elements()] == ["H", "He"]
    judge.reset()
    assert judge.discovered_z == set()
    judge.evaluate(Nucleus(1, 0), True)
    judge.discovered_z.clear()
    assert not judge.discovered_z


def test_custom_oracle_is_respected() -> None:
    judge = Judge(oracle=StabilityOracle(stable_isotopes={6: (20,)}))
    assert judge.evaluate(Nucleus(6, 20), True).is_correct
    assert not judge.evaluate(Nucleus(6, 6), True).reality_stable


def test_verdict_invariants_over_random_walk() -> None:
    judge = Judge()
    engine = InnerEngine(seed=7)
    engine.reset(len(CATALOG))
    for _ in range(2000):
        res = engine.step(len(CATALOG))
        v = judge.evaluate(res.nucleus, res.engine_claimed_stable)
        assert v.is_correct == (v.engine_claimed_stable and v.reality_stable and v.in_catalog)
        if v.is_correct:
            assert v.in_catalog and v.reality_stable
        if not v.in_catalog:
            assert not v.reality_stable and v.matched_element is None
    assert judge.discovered_z <= {e.Z for e in CATALOG.all()}
    assert judge.discovered_z
