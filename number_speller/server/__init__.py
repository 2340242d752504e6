"""HTTP API for the number speller.

WHY: Exposes the spellers to tools that cannot import Python.

HOW: app.py defines the FastAPI application and endpoints, models.py the
pydantic request/response schemas.
"""
