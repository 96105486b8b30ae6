"""Entry point for the Contacts Manager API.

Launches the FastAPI application with Uvicorn.  Intended to be executed
from the project root, for example under Docker, where you only specify
a single Python file to run.

Configuration (``STORAGE_BACKEND``, ``DATABASE_URL``, ``LOG_LEVEL`` …) is
read from environment variables; see ``contacts_manager/app/core/config.py``.

Usage:
    python run.py
"""
import logging
import os

from uvicorn import Config, Server

from contacts_manager.app.main import app


def main() -> None:
    """Serve the API.

    Host and port are read from environment variables ``HOST`` and
    ``PORT``.  Defaults are ``0.0.0.0`` and ``8000``.
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    Server(config).run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
