from __future__ import annotations

import argparse
import sys
from dataclasses import replace

from nuclide_discovery.config import SimulationConfig, load_simulation_config
from nuclide_discovery.engine import InnerEngine
from nuclide_discovery.oracle import StabilityOracle
from nuclide_discovery.report import render_periodic_table, write_session_artifacts
from nuclide_discovery.session import DiscoverySession


def _parse_run_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run the nuclide discovery simulation headless for a number of ticks.")
    ap.add_argument("--config", default="", help="Simulation config (YAML/JSON); defaults used if omitted.")
    ap.add_argument("--seed", type=int, default=None, help="Engine RNG seed (overrides config).")
    ap.add_argument("--ticks", type=int, default=None, help="Number of ticks to run (overrides config).")
    ap.add_argument("--max_z", type=int, default=None, help="Search range in Z, conventionally the catalog size.")
    ap.add_argument("--history_limit", type=int, default=None, help="Submission log size (newest first).")
    ap.add_argument(
        "--judge_claims_only",
        action="store_true",
        help="Only send the engine's stability claims to the judge (unclaimed ticks are not judged).",
    )
    ap.add_argument("--out_dir", default="", help="Write <stem>_summary.json and <stem>_history.csv here.")
    ap.add_argument("--stem", default="session", help="Filename stem for artifacts.")
    ap.add_argument("--show_table", action="store_true", help="Print the periodic table of discovered elements.")
    ap.add_argument("--progress", action="store_true", help="Show a progress bar.")
    return ap.parse_args(argv)


def _parse_valley_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Print oracle stability targets vs the engine's own valley belief.")
    ap.add_argument("--z_min", type=int, default=1, help="Minimal Z.")
    ap.add_argument("--z_max", type=int, default=118, help="Maximal Z.")
    return ap.parse_args(argv)


def _config_from_args(args: argparse.Namespace) -> SimulationConfig:
    cfg = load_simulation_config(args.config) if args.config else SimulationConfig()
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = int(args.seed)
    if args.ticks is not None:
        overrides["ticks"] = int(args.ticks)
    if args.max_z is not None:
        overrides["max_z"] = int(args.max_z)
    if args.history_limit is not None:
        overrides["history_limit"] = int(args.history_limit)
    if args.judge_claims_only:
        overrides["judge_unclaimed"] = False
    return replace(cfg, **overrides) if overrides else cfg


def main_run(argv: list[str] | None = None) -> int:
    args = _parse_run_args(argv)
    try:
        cfg = _config_from_args(args)
    except (ValueError, FileNotFoundError) as exc:
        sys.stderr.write(f"ERROR: {exc}\n")
        return 2

    session = DiscoverySession(cfg)
    stats = session.run(progress=bool(args.progress))
    n = session.current

    print(
        f"[NUCLIDE-RUN] steps={stats.steps} submissions={stats.submissions} "
        f"correct={stats.correct} accuracy={100.0 * stats.accuracy:.1f}% "
        f"discovered={stats.discovered}/{stats.catalog_size}"
    )
    print(f"[NUCLIDE-RUN] current nucleus: Z={n.protons}, N={n.neutrons}, A={n.mass_number}")

    if args.show_table:
        print(render_periodic_table(session.judge.catalog, session.judge.discovered_z, n.protons))

    if args.out_dir:
        write_session_artifacts(session, args.out_dir, stem=args.stem)
    return 0


def main_valley(argv: list[str] | None = None) -> int:
    args = _parse_valley_args(argv)
    oracle = StabilityOracle()
    engine = InnerEngine(seed=0)

    for row in oracle.valley_table(args.z_min, args.z_max):
        belief = engine.target_n(row.Z)
        nearest = min(sorted(row.targets), key=lambda t: abs(belief - t))
        gap = belief - nearest
        source = "iso" if row.explicit else "fit"
        targets = ",".join(str(t) for t in row.targets)
        print(
            f"Z={row.Z:3d} {row.symbol:<2} [{source}] N_stable={targets:<12} "
            f"N_engine={belief:3d} gap={gap:+d}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main_run())
