from __future__ import annotations

import io
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence

import pandas as pd

from ..analysis.model import AnalysisResult

SHEET_NAME = "Attendance"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class ReportColumn:
    id: str
    label: str
    visible: bool = True

    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "visible": self.visible}


DEFAULT_COLUMNS: tuple[ReportColumn, ...] = (
    ReportColumn("name", "Name", True),
    ReportColumn("schedule", "Schedule", True),
    ReportColumn("absences", "Absences", True),
    ReportColumn("days_registered", "Days Registered", False),
    ReportColumn("late_days", "Late Arrivals", False),
    ReportColumn("late_minutes", "Late Minutes", False),
    ReportColumn("late_hours", "Late Hours", True),
    ReportColumn("overtime_hours", "Overtime Hours", False),
    ReportColumn("saturday_hours", "Saturday Hours", False),
    ReportColumn("total_hours", "Total Hours", True),
)

_VALUES: Dict[str, Callable[[AnalysisResult], Any]] = {
    "name": lambda r: r.name,
    "schedule": lambda r: r.schedule.label,
    "absences": lambda r: r.absences,
    "days_registered": lambda r: r.days_registered,
    "late_days": lambda r: r.late_days,
    "late_minutes": lambda r: r.late_minutes,
    "late_hours": lambda r: r.late_hours,
    "overtime_hours": lambda r: r.overtime_hours,
    "saturday_hours": lambda r: r.saturday_hours,
    "total_hours": lambda r: r.total_hours,
}


def apply_visibility(visibility: Mapping[str, bool], columns: Sequence[ReportColumn] = DEFAULT_COLUMNS) -> List[ReportColumn]:
    """Overlay stored {id: visible} flags on the column definitions; unknown ids are ignored."""
    return [replace(col, visible=bool(visibility.get(col.id, col.visible))) for col in columns]


def build_export_rows(results: Iterable[AnalysisResult], columns: Sequence[ReportColumn] = DEFAULT_COLUMNS) -> List[dict]:
    visible = [col for col in columns if col.visible and col.id in _VALUES]
    return [{col.label: _VALUES[col.id](r) for col in visible} for r in results]


def export_to_excel(results: Iterable[AnalysisResult], columns: Sequence[ReportColumn] = DEFAULT_COLUMNS) -> io.BytesIO:
    """Write the visible result columns to an in-memory xlsx workbook."""
    visible_labels = [col.label for col in columns if col.visible and col.id in _VALUES]
    df = pd.DataFrame(build_export_rows(results, columns), columns=visible_labels)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)

    output.seek(0)
    return output
