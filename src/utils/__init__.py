"""
Utility modules for CSAT Pulse.

Cross-cutting concerns:
- Report: Text rendering and CSV export
"""
