"""
Headless orchestrator: owns the tick loop, feeds engine output to the judge,
closes the mark-solved feedback loop and keeps a bounded submission log.

A manual "step once" and a timed loop both go through tick().
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from tqdm import tqdm

from nuclide_discovery.config import SimulationConfig
from nuclide_discovery.engine import InnerEngine, StepResult
from nuclide_discovery.judge import Judge, JudgeVerdict
from nuclide_discovery.nucleus import Nucleus


@dataclass(frozen=True)
class SubmissionRecord:
    attempt: int  # порядковый номер заявки, с 1
    step: int
    verdict: JudgeVerdict


@dataclass(frozen=True)
class TickOutcome:
    step: StepResult
    verdict: Optional[JudgeVerdict]


@dataclass(frozen=True)
class SessionStats:
    steps: int
    submissions: int
    correct: int
    discovered: int
    catalog_size: int

    @property
    def accuracy(self) -> float:
        return self.correct / self.submissions if self.submissions > 0 else 0.0


class DiscoverySession:
    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        engine: Optional[InnerEngine] = None,
        judge: Optional[Judge] = None,
    ) -> None:
        self.config = config if config is not None else SimulationConfig()
        self.engine = (
            engine
            if engine is not None
            else InnerEngine(params=self.config.to_engine_params(), seed=self.config.seed)
        )
        self.judge = judge if judge is not None else Judge()
        self._history: Deque[SubmissionRecord] = deque(maxlen=self.config.history_limit)
        self.step_count = 0
        self.submission_count = 0
        self.correct_count = 0
        self.engine.reset(self.config.max_z)

    @property
    def current(self) -> Nucleus:
        return self.engine.state

    @property
    def history(self) -> List[SubmissionRecord]:
        """Submissions, newest first, at most history_limit of them."""
        return list(self._history)

    def reset(self) -> None:
        self.step_count = 0
        self.submission_count = 0
        self.correct_count = 0
        self._history.clear()
        self.judge.reset()
        self.engine.reset(self.config.max_z)

    def tick(self) -> TickOutcome:
        result = self.engine.step(self.config.max_z)
        self.step_count += 1

        claimed = result.engine_claimed_stable
        if not claimed and not self.config.judge_unclaimed:
            return TickOutcome(step=result, verdict=None)

        verdict = self.judge.evaluate(result.nucleus, claimed)

        if verdict.is_correct:
            self.engine.mark_solved(verdict.nucleus)
            self.correct_count += 1

        if claimed:
            self.submission_count += 1
            self._history.appendleft(
                SubmissionRecord(
                    attempt=self.submission_count,
                    step=self.step_count,
                    verdict=verdict,
                )
            )

        return TickOutcome(step=result, verdict=verdict)

    def run(self, n_ticks: Optional[int] = None, *, progress: bool = False) -> SessionStats:
        total = self.config.ticks if n_ticks is None else int(n_ticks)
        for _ in tqdm(range(total), total=total, desc="ticks", disable=not progress, leave=True):
            self.tick()
        return self.stats

    @property
    def stats(self) -> SessionStats:
        return SessionStats(
            steps=self.step_count,
            submissions=self.submission_count,
            correct=self.correct_count,
            discovered=len(self.judge.discovered_z),
            catalog_size=len(self.judge.catalog),
        )
