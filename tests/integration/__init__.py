"""
API test package for the Kanban board.

Tests use the Flask test client and demonstrate:
- CRUD operation testing
- Input validation testing
- Routing and CORS behaviour
"""
