#!/usr/bin/env python3
"""Score and rank schedules from CSV. Run as: python -m schedule_eval.demo --sections data/sections.csv --distances data/distances.csv"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .distances import DistanceTable
from .errors import ScheduleEvaluationError
from .io import load_buildings_csv, load_distances_csv, load_sections_csv
from .models import ScoreBreakdown
from .scoring import rank_schedules

logger = logging.getLogger(__name__)


def fmt_time(mins: int) -> str:
    """
    Convert minutes since midnight to a human-readable time like '2:05pm'.
    """
    mins = int(mins)
    h24 = mins // 60
    m = mins % 60
    ampm = "am" if h24 < 12 else "pm"
    h12 = h24 % 12
    if h12 == 0:
        h12 = 12
    return f"{h12}:{m:02d}{ampm}"


def print_results_table(results: List[ScoreBreakdown], title: str) -> None:
    """
    Helper to print a pretty results table with a title.
    """
    print("\n" + "=" * 96)
    print(f"SCENARIO: {title}")
    print("=" * 96)
    print(f"{'RANK':<4} {'SCHEDULE':<14} {'#':>3} {'QUALITY':>8} {'MAXDIST':>8} {'IDLE':>7} "
          f"{'SCORE':>7}  {'q':>5} {'d':>5} {'i':>5}")
    print("-" * 96)

    for i, r in enumerate(results, start=1):
        print(f"{i:<4} {r.schedule.schedule_id or '-':<14} {len(r.schedule):>3} "
              f"{r.avg_quality:>8.2f} {r.max_distance:>8.1f} {r.avg_idle_min:>7.1f} "
              f"{r.score:>7.3f}  {r.quality_score:>5.3f} {r.distance_score:>5.3f} {r.idle_score:>5.3f}")

    print("=" * 96)

    # Explainability: show WHY the top few were ranked that way
    explain_top_n = min(3, len(results))
    if explain_top_n > 0:
        print("\nExplainability (top results):")
        for i in range(explain_top_n):
            r = results[i]
            w_q, w_d, w_i = r.weights
            print(f"\n#{i+1}: {r.schedule.schedule_id or '-'}")
            for s in sorted(r.schedule, key=lambda s: (s.day_tokens(), s.start_min)):
                rating = "unrated" if s.professor.rating is None else f"{s.professor.rating:.1f}"
                print(f"  {s.course_id:<14} {s.days:<6} {fmt_time(s.start_min)}-{fmt_time(s.end_min):<8} "
                      f"{s.building_code:<8} {s.professor.name} ({rating})")
            print(f"  Final score: {r.score:.3f} = "
                  f"{w_q:.2f}*{r.quality_score:.3f} + {w_d:.2f}*(1-{r.distance_score:.3f}) "
                  f"+ {w_i:.2f}*(1-{r.idle_score:.3f})")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Rank candidate schedules by weighted objective")
    parser.add_argument("--sections", required=True, help="sections CSV, grouped by schedule_id")
    parser.add_argument("--distances", help="distance CSV with from,to,distance")
    parser.add_argument("--buildings", help="buildings CSV; used for walking distances if --distances is absent")
    parser.add_argument("--weights", type=float, nargs=3, default=[0.5, 0.3, 0.2],
                        metavar=("QUALITY", "DISTANCE", "IDLE"))
    parser.add_argument("--top", type=int, default=10, help="how many schedules to show")
    parser.add_argument("--keep-invalid", action="store_true", help="score schedules with time conflicts too")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not (args.distances or args.buildings):
        print("Provide one of: --distances, --buildings", file=sys.stderr)
        return 1

    try:
        if args.distances:
            table = load_distances_csv(args.distances)
        else:
            table = DistanceTable.from_buildings(load_buildings_csv(args.buildings))

        schedules = load_sections_csv(args.sections)
        logger.info("Loaded %d schedule(s) from %s", len(schedules), args.sections)

        results = rank_schedules(
            schedules,
            table,
            args.weights,
            top_k=args.top,
            skip_invalid=not args.keep_invalid,
        )
    except (ScheduleEvaluationError, ValueError) as e:
        print(f"Evaluation error: {e}", file=sys.stderr)
        return 1

    weights = " / ".join(f"{w:.2f}" for w in args.weights)
    print_results_table(results, f"Weights quality/distance/idle = {weights}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
