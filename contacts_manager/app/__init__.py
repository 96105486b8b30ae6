"""
Application package initializer.

The project is organised into layers: ``schemas`` (request and view
models), ``repositories`` (storage), ``services`` (validation, CRUD and
query logic) and ``api`` (versioned FastAPI routers).  ``core`` holds
configuration, logging, the database helpers and the shared
validation rules.
"""

from .main import app  # noqa: F401
