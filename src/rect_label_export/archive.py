"""
Zip packaging of per-image label files.
"""

import io
import logging
import zipfile
from typing import Iterable, Tuple

logger = logging.getLogger(__name__)


def build_zip_archive(files: Iterable[Tuple[str, str]]) -> bytes:
    """
    Pack (file_name, content) pairs into an in-memory zip.

    Args:
        files: File names and their text contents, written UTF-8 encoded

    Returns:
        Bytes of the zip archive
    """
    buffer = io.BytesIO()
    count = 0
    with zipfile.ZipFile(buffer, 'w', compression=zipfile.ZIP_DEFLATED) as zf:
        for file_name, content in files:
            zf.writestr(file_name, content.encode('utf-8'))
            count += 1

    logger.debug(f"Built zip archive with {count} files")
    return buffer.getvalue()
