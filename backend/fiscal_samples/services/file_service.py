"""
FiscalAPI Samples — Downloaded File Storage
=============================================

What:  Writes files returned by FiscalAPI (bulk-download packages, raw SAT
       request/response XML) to the local downloads directory.
Why:   The download endpoints demonstrate receiving a base64 file from
       FiscalAPI and persisting it; this keeps the decoding and disk I/O
       out of the route handlers.
How:   Base64-decodes the payload, strips any directory part from the
       file name, and writes it asynchronously with aiofiles.
Who:   Called by the download-requests routes.

Security Model:
    The file name comes from a remote service, so it is reduced to its
    basename before joining it to DOWNLOADS_ROOT. A name like
    "../../etc/passwd" is written as "passwd" inside the downloads root.
"""

import base64
import binascii
import logging
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Optional

import aiofiles

from fiscal_samples.config import settings
from fiscal_samples.exceptions import FileStorageError
from fiscal_samples.schemas.fiscal import FileResponse

logger = logging.getLogger(__name__)


class FileService:
    """
    Persists downloaded files under a single flat directory.

    Directory Structure:
        facturas/
        ├── 5f1c...-package.zip
        ├── solicitud-5f1c....xml
        └── respuesta-5f1c....xml

    Existing files with the same name are overwritten: downloading the same
    package twice yields the same file.
    """

    def __init__(self, downloads_root: Optional[str] = None):
        """
        Args:
            downloads_root: Override the default directory (used in tests).
                            If None, uses settings.downloads_root.
        """
        self.downloads_root = Path(downloads_root or settings.downloads_root).resolve()

    @staticmethod
    def safe_file_name(file_name: str) -> str:
        """
        Reduce a remote file name to a bare name with no directory part.

        Handles both separators, since FiscalAPI runs on Windows hosts and
        may send backslashes.

        Raises:
            FileStorageError if nothing usable is left (empty, ".", "..").
        """
        name = PureWindowsPath(PurePosixPath(file_name).name).name.strip()
        if name in ("", ".", ".."):
            raise FileStorageError(
                message="Downloaded file has no usable name.",
                context={"file_name": file_name},
            )
        return name

    @staticmethod
    def decode(file: FileResponse) -> bytes:
        """Strict base64, except that line breaks and other whitespace are ignored."""
        compact = "".join(file.base64_file.split())
        try:
            return base64.b64decode(compact, validate=True)
        except (binascii.Error, ValueError) as e:
            raise FileStorageError(
                message="Downloaded file content is not valid base64.",
                context={"file_name": file.file_name, "error": str(e)},
            )

    async def save_file(self, file: FileResponse) -> Path:
        """
        Decode a downloaded file and write it to the downloads directory.

        Returns:
            Absolute path of the written file.

        Raises:
            FileStorageError on invalid base64, unusable name, or OS errors.
        """
        content = self.decode(file)
        target = self.downloads_root / self.safe_file_name(file.file_name)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(target, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to write downloaded file %s: %s", target, str(e))
            raise FileStorageError(
                message="Failed to save downloaded file. Please try again.",
                context={"path": str(target), "os_error": str(e)},
            )

        logger.info("Downloaded file stored: %s (%d bytes)", target.name, len(content))
        return target


# ── Singleton Instance ────────────────────────────────────────────────────
file_service = FileService()


def get_file_service() -> FileService:
    """FastAPI dependency returning the shared file service."""
    return file_service
