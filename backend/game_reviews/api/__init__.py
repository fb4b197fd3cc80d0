"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is a JSON object: a resource envelope or {"msg": ...}

Design Decisions:
    - Thin routes: validate (core) → query (services) → shape (schemas)
"""
