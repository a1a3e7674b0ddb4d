"""
Logging configuration using Loguru.

Structured JSON entries produced by ``app.utils.logging`` are routed through
the sinks configured here.
"""
import sys
from pathlib import Path
from loguru import logger

from app.config import settings


def setup_logging() -> None:
    """
    Configure loguru sinks.

    Development mode:
    - Colorized console output with file:line info
    - Level from settings

    Production mode:
    - Plain console output (for container logs)
    - File output with rotation
    """

    # Remove default handler
    logger.remove()

    dev_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    # Entries are already JSON documents
    prod_format = "{message}"

    logger.add(
        sys.stdout,
        format=dev_format if settings.debug else prod_format,
        level=settings.log_level,
        colorize=settings.debug,
        backtrace=settings.debug,
        diagnose=settings.debug,
    )

    if not settings.debug:
        log_dir = Path(settings.log_directory)
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "wireframe-service.log",
            format=prod_format,
            level="INFO",
            rotation="500 MB",
            retention="10 days",
            compression="zip",
            enqueue=True,
        )

    logger.info(f"Logging configured - Level: {settings.log_level}")
