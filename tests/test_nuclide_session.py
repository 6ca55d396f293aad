from __future__ import annotations

import pytest

from nuclide_discovery.config import SimulationConfig
from nuclide_discovery.engine import InnerEngine, StepResult
from nuclide_discovery.judge import Judge
from nuclide_discovery.nucleus import Nucleus
from nuclide_discovery.session import DiscoverySession


def _session(**kw) -> DiscoverySession:
    return DiscoverySession(SimulationConfig(**kw))


def test_fixed_seed_run_replays_exactly() -> None:
    a = _session(seed=42, history_limit=5000)
    b = _session(seed=42, history_limit=5000)
    stats_a = a.run(1000)
    stats_b = b.run(1000)
    assert stats_a == stats_b
    assert a.history == b.history
    assert a.judge.discovered_z == b.judge.discovered_z
    assert a.current == b.current


def test_run_counts_are_consistent() -> None:
    s = _session(seed=42, history_limit=5000)
    stats = s.run(1000)
    claimed_correct = sum(
        1 for r in s.history if r.verdict.engine_claimed_stable and r.verdict.is_correct
    )
    assert stats.steps == 1000
    assert stats.submissions == len(s.history)
    assert stats.correct == claimed_correct
    assert stats.correct > 0
    assert 0.0 < stats.accuracy <= 1.0
    correct_pairs = {r.verdict.nucleus.key() for r in s.history if r.verdict.is_correct}
    assert s.engine.solved_count == len(correct_pairs)


def test_history_is_bounded_and_newest_first() -> None:
    s = _session(seed=1, history_limit=5)
    stats = s.run(500)
    hist = s.history
    assert len(hist) == min(5, stats.submissions)
    attempts = [r.attempt for r in hist]
    assert attempts == sorted(attempts, reverse=True)
    if hist:
        assert attempts[0] == stats.submissions


def test_every_tick_is_judged_by_default() -> None:
    s = _session(seed=3)
    for _ in range(50):
        assert s.tick().verdict is not None


def test_claims_only_mode_skips_unclaimed_ticks() -> None:
    s = _session(seed=3, judge_unclaimed=False, history_limit=5000)
    for _ in range(300):
        out = s.tick()
        assert (out.verdict is None) == (not out.step.engine_claimed_stable)
    claimed_discoveries = {
        r.verdict.nucleus.protons
        for r in s.history
        if r.verdict.reality_stable and r.verdict.in_catalog
    }
    assert s.judge.discovered_z == claimed_discoveries


def test_reset_clears_everything() -> None:
    s = _session(seed=9)
    s.run(300)
    s.reset()
    stats = s.stats
    assert (stats.steps, stats.submissions, stats.correct, stats.discovered) == (0, 0, 0, 0)
    assert s.history == []
    assert s.engine.solved_count == 0
    assert stats.accuracy == 0.0


class _FixedEngine(InnerEngine):
    """Всегда заявляет один и тот же C-12."""

    def step(self, max_z: int) -> StepResult:
        self._state = Nucleus(6, 6)
        return StepResult(nucleus=self._state, engine_claimed_stable=True)


def test_correct_verdict_feeds_back_into_engine() -> None:
    engine = _FixedEngine(seed=0)
    s = DiscoverySession(SimulationConfig(), engine=engine, judge=Judge())
    out = s.tick()
    assert out.verdict is not None and out.verdict.is_correct
    assert engine.is_solved(6, 6)
    assert s.stats.correct == 1 and s.stats.discovered == 1


@pytest.mark.parametrize("judge_unclaimed", [True, False])
def test_seed_42_thousand_ticks_counts(judge_unclaimed) -> None:
    s = _session(seed=42, history_limit=5000, judge_unclaimed=judge_unclaimed)
    stats = s.run(1000)
    assert stats.steps == 1000
    assert stats.submissions == 619
    assert stats.correct == 155
