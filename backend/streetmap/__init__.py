"""
StreetMap Backend — Application Package Initializer
===================================================

What: Marks the `streetmap` directory as a Python package.
Who:  Imported by uvicorn (`streetmap.main:app`), pytest and the console script.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP verbs, paths, response envelopes
    ├─────────────────────────────────────┤
    │      Repositories (Data Access)     │  ← list / create / update / delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async engine owned by the app
    └─────────────────────────────────────┘

    Streets and lines are independent collections; the only thing the two
    repositories share is the engine stored on `app.state`.
"""

__version__ = "1.0.0"
