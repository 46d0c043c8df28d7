"""Main entry point for the object trace frontend."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from trace_frontend.api import create_fastapi_app
from trace_frontend.app import Application
from trace_frontend.config import Settings
from trace_frontend.logging_config import setup_logging


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    settings = Settings.from_env()
    setup_logging(settings)

    app = create_fastapi_app(Application(settings))

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
