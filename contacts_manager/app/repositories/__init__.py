"""Storage backends for countries and persons (in‑memory and SQLite)."""
