"""Core — pure domain logic: error hierarchy, domain types, input validation.

Invariants:
    - Nothing in core performs IO or imports from api/, infrastructure/ or models/
    - Validators return tagged results; the shell decides how to raise
"""
