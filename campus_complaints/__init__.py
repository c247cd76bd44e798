"""
Campus complaints core.

Complaint lifecycle state machine, deadline urgency classification,
role-scoped query/filter engine and dashboard aggregation for the campus
complaints portal.
"""

__version__ = "1.0.0"
