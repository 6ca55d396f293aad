from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from nuclide_discovery.elements import ElementCatalog
from nuclide_discovery.session import DiscoverySession


SCHEMA_VERSION = "nuclide_session.v1"

HISTORY_COLUMNS = [
    "attempt",
    "step",
    "Z",
    "N",
    "A",
    "symbol",
    "engine_claimed_stable",
    "reality_stable",
    "in_catalog",
    "nearest_stable_n",
    "is_correct",
]


def session_summary(session: DiscoverySession) -> Dict[str, object]:
    stats = session.stats
    current = session.current
    element = session.judge.catalog.lookup(current.protons)
    return {
        "schema_version": SCHEMA_VERSION,
        "config": session.config.to_dict(),
        "stats": {
            "steps": stats.steps,
            "submissions": stats.submissions,
            "correct": stats.correct,
            "accuracy": stats.accuracy,
            "discovered": stats.discovered,
            "catalog_size": stats.catalog_size,
        },
        "discovered_symbols": [e.symbol for e in session.judge.discovered_elements()],
        "current": {
            "Z": current.protons,
            "N": current.neutrons,
            "A": current.mass_number,
            "symbol": element.symbol if element is not None else None,
        },
        "solved_states": session.engine.solved_count,
    }


def history_frame(session: DiscoverySession) -> pd.DataFrame:
    rows: List[Dict[str, object]] = []
    for rec in session.history:
        v = rec.verdict
        rows.append(
            {
                "attempt": rec.attempt,
                "step": rec.step,
                "Z": v.nucleus.protons,
                "N": v.nucleus.neutrons,
                "A": v.nucleus.mass_number,
                "symbol": v.matched_element.symbol if v.matched_element is not None else "",
                "engine_claimed_stable": v.engine_claimed_stable,
                "reality_stable": v.reality_stable,
                "in_catalog": v.in_catalog,
                "nearest_stable_n": v.nearest_stable_n,
                "is_correct": v.is_correct,
            }
        )
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def write_session_artifacts(
    session: DiscoverySession,
    out_dir: str | Path,
    stem: str = "session",
) -> Tuple[Path, Path]:
    """
    Записать <stem>_summary.json и <stem>_history.csv в out_dir с логом путей.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    summary_path = out / f"{stem}_summary.json"
    text = json.dumps(session_summary(session), ensure_ascii=False, sort_keys=True, indent=2)
    summary_path.write_text(text + "\n", encoding="utf-8")
    print(f"[NUCLIDE-IO] Saved summary: {summary_path}")

    history_path = out / f"{stem}_history.csv"
    history_frame(session).to_csv(history_path, index=False)
    print(f"[NUCLIDE-IO] Saved CSV: {history_path}")

    return summary_path, history_path


def render_periodic_table(
    catalog: ElementCatalog,
    discovered: Iterable[int],
    current_z: Optional[int] = None,
) -> str:
    """
    Text view of the display grid: discovered symbols are shown, undiscovered
    cells as ".", empty cells blank, the current Z in brackets.
    """
    found = set(discovered)
    grid = catalog.display_grid()
    lines: List[str] = []
    for row in grid:
        cells: List[str] = []
        for Z in row:
            Z = int(Z)
            if Z == 0:
                cell = ""
            else:
                element = catalog.lookup(Z)
                cell = element.symbol if (element is not None and Z in found) else "."
                if current_z is not None and Z == current_z:
                    cell = f"[{cell}]"
            cells.append(f"{cell:>4}")
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)
