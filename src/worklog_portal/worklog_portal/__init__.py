"""Worklog Portal package.

This package is organized by feature modules (users, projects, timesheets, leave, ...)
with a thin Flask controller layer over service/repository layers that persist to
JSON documents.
"""
