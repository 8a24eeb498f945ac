from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from functools import cached_property
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_timestamp
from ..core.enums import PunchKind, PunchOperation
from ..core.exceptions import ValidationError

# Column headers of the time-clock spreadsheet export.
COL_DEPARTMENT = "Departamento"
COL_USER_NUMBER = "Nro. de usuario"
COL_USER_ID = "ID de usuario"
COL_NAME = "Nombre"
COL_TIMESTAMP = "Fecha/Hora"
COL_KIND = "Tipo de registro"
COL_OPERATION = "Operacion"

REQUIRED_COLUMNS = (COL_NAME, COL_TIMESTAMP, COL_KIND)


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _optional_operation(value: Any) -> Optional[PunchOperation]:
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        return PunchOperation(text)
    except ValueError as e:
        raise ValidationError(f"Unknown punch operation {text!r}") from e


def _kind(value: Any) -> PunchKind:
    try:
        return PunchKind(str(value).strip())
    except ValueError as e:
        raise ValidationError(f"Unknown punch kind {value!r}") from e


@dataclass(frozen=True)
class PunchRecord:
    """Domain entity: one observed clock event.

    `recorded_at` keeps the raw YYYY-MM-DD HH:MM:SS text handed over by
    ingestion; it is parsed on first use so a malformed value fails the run.
    Department and user number/id are passthrough only; the employee name
    is the identity key.
    """

    employee_name: str
    recorded_at: str
    kind: PunchKind
    operation: Optional[PunchOperation] = None
    department: Optional[str] = None
    user_number: Optional[int] = None
    user_id: Optional[int] = None

    @cached_property
    def timestamp(self) -> datetime:
        # Parsed once per record.
        return parse_timestamp(self.recorded_at)

    @property
    def work_date(self) -> date:
        return self.timestamp.date()

    @property
    def is_break_start(self) -> bool:
        return self.kind == PunchKind.BREAK and self.operation == PunchOperation.OUT

    @property
    def is_break_end(self) -> bool:
        return self.kind == PunchKind.BREAK and self.operation == PunchOperation.IN

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "PunchRecord":
        """Build a record from one spreadsheet row keyed by export headers."""
        department = row.get(COL_DEPARTMENT)
        return cls(
            employee_name=str(row[COL_NAME]),
            recorded_at=str(row[COL_TIMESTAMP]),
            kind=_kind(row[COL_KIND]),
            operation=_optional_operation(row.get(COL_OPERATION)),
            department=str(department) if department not in (None, "") else None,
            user_number=_optional_int(row.get(COL_USER_NUMBER)),
            user_id=_optional_int(row.get(COL_USER_ID)),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PunchRecord":
        """Inverse of to_dict (JSON API payloads)."""
        try:
            name = data["employee_name"]
            recorded_at = data["recorded_at"]
            kind = data["kind"]
        except KeyError as e:
            raise ValidationError(f"Punch is missing field {e.args[0]!r}") from e
        return cls(
            employee_name=str(name),
            recorded_at=str(recorded_at),
            kind=_kind(kind),
            operation=_optional_operation(data.get("operation")),
            department=data.get("department"),
            user_number=_optional_int(data.get("user_number")),
            user_id=_optional_int(data.get("user_id")),
        )

    def to_dict(self) -> dict:
        return {
            "employee_name": self.employee_name,
            "recorded_at": self.recorded_at,
            "kind": self.kind.value,
            "operation": self.operation.value if self.operation else None,
            "department": self.department,
            "user_number": self.user_number,
            "user_id": self.user_id,
        }
