"""Example: run the analysis engine directly (no Flask, no database).

Usage: python -m examples.example_usage path/to/punches.xlsx
"""

import sys

from src.attendance_analysis.attendance_analysis.analysis.periods import default_period
from src.attendance_analysis.attendance_analysis.analysis.service import analyze_period
from src.attendance_analysis.attendance_analysis.preferences.model import DEFAULT_CONFIG
from src.attendance_analysis.attendance_analysis.punches.reader import read_punches


def main(path: str) -> None:
    with open(path, "rb") as fh:
        punches = read_punches(fh, path)

    period = default_period(punches)
    print(f"Period {period.start} .. {period.end}")
    for r in analyze_period(punches, period.start, period.end, DEFAULT_CONFIG):
        print(
            f"{r.name:<30} {r.schedule.label:<24} absences={r.absences} "
            f"late={r.late_minutes}min/{r.late_hours}h overtime={r.overtime_hours}h "
            f"saturday={r.saturday_hours}h total={r.total_hours}h"
        )


if __name__ == "__main__":
    main(sys.argv[1])
