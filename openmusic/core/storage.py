# ============================================================================
# FILE: openmusic/core/storage.py
# Filesystem storage for album cover images
# ============================================================================
import os
import re
import secrets
import logging

logger = logging.getLogger(__name__)

# Extensions kept from the client's file name; anything else is dropped
EXTENSION_PATTERN = re.compile(r"\.[a-z0-9]{1,5}")

class StorageService:
    """Writes uploaded files under a single directory"""

    def __init__(self, folder: str):
        self.folder = os.path.abspath(folder)

    def ensure_folder(self) -> None:
        os.makedirs(self.folder, exist_ok=True)

    def write_file(self, content: bytes, original_name: str) -> str:
        """
        Store the bytes under a generated, URL-safe file name

        Only the extension of the client's name survives, so the name can be
        put in a URL path as is.

        Returns:
            The generated file name (relative to the storage folder)
        """
        self.ensure_folder()
        extension = os.path.splitext(original_name or "")[1].lower()
        if not EXTENSION_PATTERN.fullmatch(extension):
            extension = ""
        filename = f"{secrets.token_hex(16)}{extension}"
        path = os.path.join(self.folder, filename)
        with open(path, "wb") as f:
            f.write(content)
        logger.info(f"Stored file {filename} ({len(content)} bytes)")
        return filename

    def delete_file(self, filename: str) -> bool:
        """Remove a stored file; only the base name of `filename` is used"""
        name = os.path.basename(filename or "")
        if not name:
            return False
        path = os.path.join(self.folder, name)
        try:
            os.remove(path)
        except FileNotFoundError:
            logger.warning(f"Stored file {filename} already gone")
            return False
        logger.info(f"Deleted file {filename}")
        return True
