"""Infrastructure Layer: transport, storage and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/
    - All network failures surface as TransportError (core/errors.py)
"""
