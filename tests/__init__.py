"""
Test suite for the Kanban board service.

This package contains:
- unit/: models, store, validation helpers, config and entry point
- integration/: HTTP-level tests through the Flask test client
- contracts/: responses validated against contracts/openapi.yaml
- smoke/: tests against a live threaded server
"""
