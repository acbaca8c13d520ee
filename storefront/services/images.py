import os
import time
from uuid import uuid4
from pathlib import Path

from storefront.core.errors import PersistenceFault
from storefront.core.logging import get_logger

logger = get_logger(__name__)


class ImageStore:
    def __init__(self, upload_dir: str, base_url: str):
        self.upload_dir = Path(upload_dir)
        self.base_url = base_url.rstrip("/")

    def ensure_dir(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def save(self, field_name: str, original_filename: str, content: bytes) -> str:
        """
        Write an uploaded image to the upload directory.

        Args:
            field_name: Multipart field the file came in on (e.g. "product")
            original_filename: Client-side name, only its extension is kept
            content: Binary content of the file

        Returns:
            The stored file name, "<field>_<epoch millis>_<8 hex chars><ext>";
            the random part keeps uploads in the same millisecond apart
        """
        file_extension = os.path.splitext(original_filename or "")[1]
        filename = f"{field_name}_{int(time.time() * 1000)}_{uuid4().hex[:8]}{file_extension}"
        try:
            self.ensure_dir()
            (self.upload_dir / filename).write_bytes(content)
        except OSError as exc:
            raise PersistenceFault(f"Error storing image: {exc}") from exc
        logger.info("images.saved", filename=filename, size=len(content))
        return filename

    def public_url(self, filename: str) -> str:
        return f"{self.base_url}/{filename}"
