"""Work-time statistics package.

This package is organized by feature modules (shifts, schedules, stats,
reporting) with service/repository classes; the Flask routes and CLI commands
are a thin layer on top.
"""
