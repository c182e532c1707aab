"""Main entry point for the botcore web channel."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from botcore.api import create_fastapi_app
from botcore.logging_config import setup_logging


def main():
    """Run the bot."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    setup_logging()

    api_host = os.getenv("API_HOST", "localhost")
    api_port = int(os.getenv("API_PORT", "8000"))

    app = create_fastapi_app()

    uvicorn.run(
        app,
        host=api_host,
        port=api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
