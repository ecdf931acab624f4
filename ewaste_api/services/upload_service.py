import logging
import shutil
import time
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

logger = logging.getLogger(__name__)


class UploadStorage:
    """Stores listing images on local disk under a public URL prefix."""

    def __init__(self, upload_dir: str, url_prefix: str = "/uploads"):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")

    def save(self, upload: Optional[UploadFile]) -> Optional[str]:
        """Write the upload to disk and return its public URL, or None."""
        if upload is None or not upload.filename:
            return None

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        # Only the basename of the client-supplied name is kept
        filename = f"{int(time.time() * 1000)}-{Path(upload.filename).name}"
        destination = self.upload_dir / filename
        with destination.open("wb") as out:
            shutil.copyfileobj(upload.file, out)

        logger.info(f"Stored upload {filename}")
        return f"{self.url_prefix}/{filename}"

    def delete(self, url: Optional[str]) -> None:
        """Remove a file previously returned by ``save``."""
        if not url:
            return
        path = self.upload_dir / Path(url).name
        try:
            path.unlink()
        except FileNotFoundError:
            return
        logger.info(f"Removed upload {path.name}")
