"""Liveness endpoint and CORS policy for the employee backend."""

__version__ = "0.1.0"
