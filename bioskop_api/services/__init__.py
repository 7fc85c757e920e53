"""Services Layer — resource orchestration between routes and the store.

Invariants:
    - Services receive their gateway at construction; they never open sessions
"""
