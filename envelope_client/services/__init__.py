"""Services Layer: async shell around the pure core.

Invariants:
    - Every service receives the shared ClientConfig through its constructor
    - Side effects (storage, hooks, network) happen only here
"""
