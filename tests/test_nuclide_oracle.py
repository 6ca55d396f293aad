from __future__ import annotations

import pytest

from nuclide_discovery.oracle import STABILITY_WINDOW, StabilityOracle


@pytest.fixture()
def oracle() -> StabilityOracle:
    return StabilityOracle()


def test_light_region_rounds_up_to_even(oracle: StabilityOracle) -> None:
    for Z in range(1, 21):
        expected = Z if Z % 2 == 0 else Z + 1
        assert oracle.approximate_stable_n(Z) == expected
    assert oracle.approximate_stable_n(10) == 10
    assert oracle.approximate_stable_n(15) == 16


def test_heavy_boundary_uses_upper_end_of_60_82_segment(oracle: StabilityOracle) -> None:
    # Z=82: 1.45 * 82 = 118.9 -> 119 -> 120. С 1.5 было бы 123 -> 124.
    assert oracle.approximate_stable_n(82) == 120
    # Z=83: 1.5 * 83 = 124.5 -> half away from zero -> 125 -> 126
    assert oracle.approximate_stable_n(83) == 126
    assert oracle.approximate_stable_n(84) == 126


def test_mid_region_breakpoints(oracle: StabilityOracle) -> None:
    assert oracle.approximate_stable_n(40) == 48
    assert oracle.approximate_stable_n(43) == 52
    assert oracle.approximate_stable_n(61) == 82


def test_non_positive_z_has_no_targets(oracle: StabilityOracle) -> None:
    assert oracle.approximate_stable_n(0) == 0
    assert oracle.approximate_stable_n(-3) == 0
    assert oracle.target_neutron_counts(0) == []


def test_carbon_anchor(oracle: StabilityOracle) -> None:
    assert oracle.is_reality_stable(6, 6)
    assert oracle.is_reality_stable(6, 5)
    assert oracle.is_reality_stable(6, 8)
    assert not oracle.is_reality_stable(6, 9)
    assert not oracle.is_reality_stable(6, 20)


def test_technetium_falls_back_to_curve(oracle: StabilityOracle) -> None:
    assert oracle.target_neutron_counts(43) == [52]
    stable = [N for N in range(0, 200) if oracle.is_reality_stable(43, N)]
    assert stable == [51, 52, 53]


def test_heavy_without_entry_uses_curve(oracle: StabilityOracle) -> None:
    assert oracle.target_neutron_counts(100) == [150]
    assert oracle.is_reality_stable(100, 151)
    assert not oracle.is_reality_stable(100, 152)


def test_outside_catalog_never_stable(oracle: StabilityOracle) -> None:
    target = oracle.approximate_stable_n(120)
    assert not oracle.is_reality_stable(120, target)
    assert not oracle.is_reality_stable(0, 0)


def test_window_is_one_neutron(oracle: StabilityOracle) -> None:
    assert STABILITY_WINDOW == 1
    assert oracle.is_reality_stable(26, 31)
    assert not oracle.is_reality_stable(26, 32)


def test_nearest_tie_prefers_smaller(oracle: StabilityOracle) -> None:
    # S: 16 and 18 are equidistant from 17
    assert oracle.nearest_stable_n(16, 17) == 16
    assert oracle.nearest_stable_n(8, 20) == 10
    assert oracle.nearest_stable_n(8, 0) == 8


def test_nearest_sorts_unsorted_override() -> None:
    oracle = StabilityOracle(stable_isotopes={10: (14, 10)})
    assert oracle.nearest_stable_n(10, 12) == 10
    assert oracle.nearest_stable_n(10, 13) == 14


def test_empty_override_uses_fallback() -> None:
    oracle = StabilityOracle(stable_isotopes={6: ()})
    assert oracle.target_neutron_counts(6) == [6]
    # Z без записи тоже идёт через кривую
    assert oracle.target_neutron_counts(7) == [8]


def test_valley_table_marks_explicit_rows(oracle: StabilityOracle) -> None:
    rows = oracle.valley_table(42, 44)
    assert [r.Z for r in rows] == [42, 43, 44]
    assert [r.explicit for r in rows] == [True, False, True]
    assert rows[1].symbol == "Tc" and rows[1].targets == [52]
