"""
Environment-driven configuration. Values come from the process environment,
optionally seeded from a .env file in the working directory.
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

VALID_IMAGE_EXTENSIONS = {
    ext.strip().lower()
    for ext in os.getenv(
        "VALID_IMAGE_EXTENSIONS", ".png,.jpg,.jpeg,.bmp,.gif,.tif,.tiff,.webp"
    ).split(",")
    if ext.strip()
}
IMAGE_LOAD_TIMEOUT = int(os.getenv("IMAGE_LOAD_TIMEOUT", "5"))
OUTPUT_IMG_FORMAT = os.getenv("OUTPUT_IMG_FORMAT", "PNG")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
SHOW_PROGRESS = os.getenv("SHOW_PROGRESS", "1").lower() not in {"0", "false", "no", "off"}
