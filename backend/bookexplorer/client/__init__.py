"""Catalog Client — HTTP client, view rendering and action handlers.

Invariants:
    - All view state lives in one CatalogState owned by CatalogController
    - Every mutation is a full round-trip: API call, then re-fetch of the collection

Design Decisions:
    - Rendering produces HTML text from plain data; the controller never touches
      the network except through BooksApiClient
"""
