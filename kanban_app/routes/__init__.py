"""
Routes package for the Kanban board service.

This package contains a single blueprint:
- api: JSON endpoints under /tasks consumed by the board front-end
"""
