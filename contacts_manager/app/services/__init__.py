"""
Service layer.

Each service encapsulates business logic for a domain and talks to
storage only through a repository, so the in‑memory store used by
default can be swapped for SQLite without changing API handlers.
"""
