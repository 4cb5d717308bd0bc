"""Services Layer — business validation between routes and repositories.

Invariants:
    - Services raise core.errors types; they never build HTTP responses
    - Repositories are injected (see api/dependencies.py)
"""
