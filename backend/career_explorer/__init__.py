"""Application package for the Career Path Explorer backend.

This package exposes the service, repository and model modules used by
the FastAPI application and the HTML pages. It is intentionally
lightweight; individual modules contain the concrete implementations and
documentation.
"""
