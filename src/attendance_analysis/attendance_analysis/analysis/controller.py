from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import List

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import now_local, parse_iso_date
from ..core.enums import ScheduleKind
from ..core.exceptions import DomainError, IngestionError, ValidationError
from ..punches.model import PunchRecord
from ..punches.reader import read_punches
from ..reports.exporter import XLSX_MIMETYPE, export_to_excel
from ..container import Container
from .breakdown import build_day_details, holidays_in_range
from .evaluator import evaluate_day
from .model import Holiday
from .periods import Period, default_period, fortnight_of, fortnight_range, next_fortnight, previous_fortnight

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _uploaded_punches() -> List[PunchRecord]:
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            raise IngestionError("Upload a punch file in the 'file' field")
        return read_punches(upload.stream, upload.filename)

    def _resolve_period(punches: List[PunchRecord]) -> Period:
        form = request.form
        if form.get("start") and form.get("end"):
            start = parse_iso_date(form["start"])
            end = parse_iso_date(form["end"])
            if end < start:
                raise ValidationError("Period end must not be before its start")
            return Period(start=start, end=end, fortnight=fortnight_of(start).fortnight)
        if form.get("month"):
            try:
                month = datetime.strptime(form["month"], "%Y-%m").date()
                fortnight = int(form.get("fortnight") or 1)
            except ValueError as e:
                raise ValidationError("month must be YYYY-MM and fortnight 1 or 2") from e
            return fortnight_range(month, fortnight)
        return default_period(punches)

    def _holidays() -> List[Holiday]:
        raw = request.form.get("holidays")
        if not raw:
            return []
        try:
            items = json.loads(raw)
            return [Holiday(day=parse_iso_date(h["date"]), kind=str(h.get("kind", "")), name=str(h.get("name", ""))) for h in items]
        except (ValueError, TypeError, KeyError) as e:
            raise ValidationError("holidays must be a JSON list of {date, kind, name}") from e

    @app.route("/api/analysis", methods=["POST"], endpoint="api_analysis")
    def api_analysis():
        try:
            punches = _uploaded_punches()
            period = _resolve_period(punches)
            config = container.preferences_service.get_config()
            results = container.analysis_service.analyze_period(punches, period.start, period.end, config)

            with_details = request.form.get("details") in ("1", "true")
            holidays = holidays_in_range(_holidays(), period.start, period.end)
            payload = []
            for r in results:
                item = r.to_dict(include_records=not with_details)
                if with_details:
                    item["days"] = [d.to_dict() for d in build_day_details(r, period.start, period.end, config, holidays)]
                payload.append(item)

            return jsonify({
                "success": True,
                "period": period.to_dict(),
                "holidays": [{"date": h.day.isoformat(), "kind": h.kind, "name": h.name} for h in holidays],
                "results": payload,
            })
        except DomainError as e:
            logger.warning("Rejected analysis request: %s", e)
            return _error(str(e), 400)
        except Exception:
            logger.exception("Analysis failed")
            return _error("Internal error while analyzing punches", 500)

    @app.route("/api/analysis/day", methods=["POST"], endpoint="api_analysis_day")
    def api_analysis_day():
        try:
            data = request.get_json(silent=True) or {}
            punches = [PunchRecord.from_dict(p) for p in data.get("punches") or []]
            try:
                kind = ScheduleKind(data.get("schedule", ScheduleKind.REGULAR.value))
            except ValueError as e:
                raise ValidationError("schedule must be 'regular' or 'early'") from e

            config = container.preferences_service.get_config()
            outcome = evaluate_day(punches, config.schedule_for(kind), config)
            return jsonify({"success": True, **outcome.to_dict()})
        except DomainError as e:
            logger.warning("Rejected day evaluation: %s", e)
            return _error(str(e), 400)
        except Exception:
            logger.exception("Day evaluation failed")
            return _error("Internal error while evaluating the day", 500)

    @app.route("/api/analysis/export", methods=["POST"], endpoint="api_analysis_export")
    def api_analysis_export():
        try:
            punches = _uploaded_punches()
            period = _resolve_period(punches)
            config = container.preferences_service.get_config()
            results = container.analysis_service.analyze_period(punches, period.start, period.end, config)
            output = export_to_excel(results, container.preferences_service.get_columns())
        except DomainError as e:
            logger.warning("Rejected export request: %s", e)
            return _error(str(e), 400)
        except Exception:
            logger.exception("Export failed")
            return _error("Internal error while exporting", 500)

        return send_file(
            output,
            download_name=f"attendance-{period.start.isoformat()}-{period.end.isoformat()}.xlsx",
            as_attachment=True,
            mimetype=XLSX_MIMETYPE,
        )

    @app.route("/api/periods", methods=["GET"], endpoint="api_periods")
    def api_periods():
        try:
            day_s = request.args.get("day")
            day = parse_iso_date(day_s) if day_s else now_local().date()
        except ValidationError as e:
            return _error(str(e), 400)

        period = fortnight_of(day)
        return jsonify({
            "success": True,
            "current": period.to_dict(),
            "previous": previous_fortnight(period).to_dict(),
            "next": next_fortnight(period).to_dict(),
        })
