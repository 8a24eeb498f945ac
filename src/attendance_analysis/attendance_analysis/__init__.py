"""Attendance Analysis package.

Turns raw time-clock punches into per-employee attendance metrics for a
reporting period. Organized by feature modules (punches, schedules,
analysis, preferences, reports) with a thin Flask controller layer on
top of plain service functions.
"""
