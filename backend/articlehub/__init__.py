"""
ArticleHub Backend — Application Package Initializer
====================================================

What: Marks the `articlehub` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows the same layered split for every request:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Query translation, CRUD rules
    ├─────────────────────────────────────┤
    │            Schemas (Data)           │  ← Pydantic API contracts
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Motor client + collection handle
    └─────────────────────────────────────┘

    Routes never touch the driver directly; services receive the collection
    handle as an argument, so each layer can be tested on its own.
"""

__version__ = "1.0.0"
