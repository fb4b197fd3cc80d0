"""Services — query functions over an AsyncSession, one module per resource.

Invariants:
    - Services never raise HTTP errors; they return rows or None
    - Mutations commit inside the service that performs them
"""
