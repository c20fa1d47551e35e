"""Domain models and errors.

Why:
- Pure, strict data structures (Pydantic v2) shared by CLI and services.
- The domain knows nothing about httpx, Typer or Rich.
"""
