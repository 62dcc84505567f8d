"""Services Layer — catalog operations over an explicit persistence context.

Invariants:
    - Services hold no state beyond the injected session
    - Every write is one commit
"""
