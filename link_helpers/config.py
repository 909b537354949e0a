import os
import logging

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

class Config:
    """Application configuration."""
    LINK_HELPERS_IMAGES_PATH = os.getenv("LINK_HELPERS_IMAGES_PATH", "/images")
    LINK_HELPERS_DEFAULT_IMAGE_EXTENSION = os.getenv("LINK_HELPERS_DEFAULT_IMAGE_EXTENSION", ".png")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = os.getenv("LOG_FORMAT", "text").lower()
    APP_LOG_DIR = os.getenv("APP_LOG_DIR")

    @classmethod
    def validate(cls) -> None:
        if not cls.LINK_HELPERS_IMAGES_PATH.startswith("/"):
            logger.warning(
                "LINK_HELPERS_IMAGES_PATH=%r is relative; image links will depend on the page URL",
                cls.LINK_HELPERS_IMAGES_PATH,
            )
        if cls.LINK_HELPERS_DEFAULT_IMAGE_EXTENSION and not cls.LINK_HELPERS_DEFAULT_IMAGE_EXTENSION.startswith("."):
            logger.warning(
                "LINK_HELPERS_DEFAULT_IMAGE_EXTENSION=%r has no leading dot",
                cls.LINK_HELPERS_DEFAULT_IMAGE_EXTENSION,
            )
        if cls.LOG_FORMAT not in ("text", "json"):
            logger.warning("Unknown LOG_FORMAT %r - falling back to text", cls.LOG_FORMAT)
