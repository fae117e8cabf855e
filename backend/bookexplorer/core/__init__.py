"""Core Layer — pure catalog logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, client/ or db/
    - All functions are pure and deterministic (CatalogState mutates only itself)

Design Decisions:
    - Functional core separated from imperative shell: the server store and the
      client controller both call into core/ for validation, search, sort and paging
"""
