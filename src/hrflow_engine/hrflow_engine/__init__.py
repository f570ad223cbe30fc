"""HRFlow attendance & payroll engine.

This package is organized by feature modules (holidays, working_hours,
attendance, payroll, geofence, reports). Each feature keeps pure calculation
functions next to a thin service that reads its inputs from repository
protocols implemented by the caller.
"""
