"""Services Layer — the book store over an async database session.

Invariants:
    - Services raise BookExplorerError subclasses, never HTTPException
    - Each write commits immediately (no multi-record transactions)
"""
