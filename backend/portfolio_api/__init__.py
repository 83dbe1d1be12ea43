"""
Portfolio API — Application Package Initializer
================================================

What: Marks the `portfolio_api` directory as a Python package.
Why:  Enables module imports like `from portfolio_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend keeps the same thin layering for every resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      ResourceService (CRUD logic)   │  ← id checks, envelopes, error mapping
    ├─────────────────────────────────────┤
    │        Schemas (pydantic models)    │  ← request/response contracts
    ├─────────────────────────────────────┤
    │    DocumentStore (MongoDB access)   │  ← one shared client per process
    └─────────────────────────────────────┘

    Projects, blog posts and contact messages differ only in their schemas
    and in which operations their router exposes.
"""

__version__ = "1.0.0"
