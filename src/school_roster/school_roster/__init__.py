"""School Roster package.

This package is organized by feature modules (roster, attendance, dashboard, ...)
with a thin Flask controller layer over an in-memory store mirrored to a blob store.
"""
