"""Library API Package — catalog and loan management over REST.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
