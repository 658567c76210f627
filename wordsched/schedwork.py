"""Backtracking scheduler assigning available workers to daily shifts."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

Schedule = list[list[int]]

EXAMPLE_AVAILABILITY: tuple[tuple[int, ...], ...] = (
    (1, 1, 1, 1),
    (1, 0, 1, 0),
    (1, 1, 0, 1),
    (1, 0, 0, 1),
)


def schedule(
    avail: Sequence[Sequence[object]], daily_need: int, max_shifts: int
) -> Schedule | None:
    """Assign ``daily_need`` distinct available workers to every day.

    ``avail[day][worker]`` is truthy when the worker can work that day. No
    worker works more than ``max_shifts`` days. Returns the worker ids for
    each day, or None when no schedule exists.
    """
    if not avail:
        return None
    if daily_need == 0:
        return [[] for _ in avail]

    days = len(avail)
    shifts = [0] * len(avail[0])
    sched: Schedule = [[] for _ in avail]

    def fill(day: int) -> bool:
        if day == days:
            return True
        today = sched[day]
        for worker, available in enumerate(avail[day]):
            if available and shifts[worker] < max_shifts and worker not in today:
                today.append(worker)
                shifts[worker] += 1
                if fill(day + 1 if len(today) == daily_need else day):
                    return True
                today.pop()
                shifts[worker] -= 1
        return False

    return sched if fill(0) else None


def format_schedule(sched: Schedule) -> str:
    """Render a schedule as one ``Day N: ...`` line per day."""
    return "\n".join(
        f"Day {day}: " + "".join(f"{worker} " for worker in workers)
        for day, workers in enumerate(sched)
    )


def _read_matrix(path: Path) -> list[list[int]]:
    return [
        [int(value) for value in line.split()]
        for line in path.read_text(encoding="utf-8").splitlines()
        if line.strip()
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Solve a scheduling problem and print the result."""
    parser = argparse.ArgumentParser(description="Schedule workers to daily shifts.")
    parser.add_argument("matrix", nargs="?", type=Path,
                        help="file of availability rows of 0/1, one row per day")
    parser.add_argument("--daily-need", type=int, default=2)
    parser.add_argument("--max-shifts", type=int, default=2)
    args = parser.parse_args(argv)

    if args.matrix is None:
        avail = [list(row) for row in EXAMPLE_AVAILABILITY]
    else:
        try:
            avail = _read_matrix(args.matrix)
        except (OSError, ValueError) as exc:
            print(exc, file=sys.stderr)
            return 1

    sched = schedule(avail, args.daily_need, args.max_shifts)
    if sched is None:
        print("No solution found!")
    else:
        print(format_schedule(sched))
    return 0


if __name__ == "__main__":
    sys.exit(main())