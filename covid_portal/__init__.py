"""
Covid Portal Backend - Application Package Initializer
========================================================

What: Marks the `covid_portal` directory as a Python package.
Who:  Imported by uvicorn (`covid_portal.main:app`), pytest and the services.

Architecture Note:
    The backend is a thin layered REST service:

    ┌─────────────────────────────────────┐
    │    Routes (login, states, districts)│  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Auth (token gate, passwords)     │  ← Bearer token verification
    ├─────────────────────────────────────┤
    │    Services (data access)           │  ← Parameterized queries
    ├─────────────────────────────────────┤
    │    Models & Schemas                 │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │    Database (engine on app.state)   │  ← Async SQLAlchemy over SQLite
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
