"""
Top‑level package for the Contacts Manager API.

All functionality lives in submodules under ``app``; this file only
makes ``contacts_manager`` importable so that modules can be referenced
by fully qualified names like ``contacts_manager.app.main``.
"""

__all__ = []
