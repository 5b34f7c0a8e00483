"""
Entry point for the Mensa Menu API.

    uvicorn mensa_menu.main:app
    # or
    mensa-menu  (console script, HOST/PORT from the environment)
"""

import os

from .app_factory import create_app
from .logging_config import setup_logging

# Configure logging at module load time
setup_logging()

app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(
        "mensa_menu.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
