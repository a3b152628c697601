# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.

import os
import sys
from pathlib import Path

from loguru import logger

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# Replace the default handler
logger.remove()

# Human-readable stderr sink
logger.add(
    sys.stderr,
    level=LOG_LEVEL,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    ),
)

log_path = Path(LOG_DIR)
if not log_path.exists():
    log_path.mkdir(parents=True, exist_ok=True)

# JSON file sink
logger.add(
    f"{LOG_DIR}/app.log",
    level=LOG_LEVEL,
    rotation="500 MB",
    retention="10 days",
    serialize=True,
    enqueue=True,
)

__all__ = ["logger"]
