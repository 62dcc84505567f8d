"""Core Layer — domain types, error hierarchy, and boundary protocols.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/, or db/
    - No IO in core/
"""
