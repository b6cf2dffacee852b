"""Resource loader: finds hand-written descriptions and examples on disk."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def operation_folder(summary: str) -> str:
    """Derive the folder name used for an operation's hand-written files.

    "Get User Info." -> "get_user_info"
    """
    return summary.replace(".", "").replace(" ", "_").lower()


def read_snippet(
    base_folder: Path, subfolder: str, file_name: str, extensions: list[str]
) -> str | None:
    """Return the stripped content of base_folder/subfolder/file_name.<ext>.

    Extensions are tried in order and the first file that can be read wins.
    Returns None when no candidate could be read.
    """
    folder = Path(base_folder, subfolder)
    for extension in extensions:
        path = folder / f"{file_name}{extension}"
        if not (path.is_file() and os.access(path, os.R_OK)):
            logger.warning("File is not readable: %s", path)
            continue
        try:
            content = path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError):
            logger.warning("Failed to read file: %s", path, exc_info=True)
            continue
        logger.info("File processed: %s", path)
        return content
    logger.warning("No %s file found with a known extension in folder: %s", file_name, folder)
    return None
