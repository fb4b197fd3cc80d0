"""Database Layer — declarative base, standalone session factory, seeding.

Invariants:
    - Request-time sessions come from infrastructure/database.py, never from here
"""
