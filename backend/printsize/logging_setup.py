"""
PrintSize Backend — Logging Configuration
===========================================

What:  Configures the root logger once per process.
Who:   The FastAPI lifespan (long-running server) and the serverless
       adapter (on cold start).

Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
"""

import logging
import sys

from printsize.config import settings


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Containers and functions capture stdout
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)
