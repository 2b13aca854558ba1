from __future__ import annotations

import logging
import os
import random
import shutil
import time

from fastapi import UploadFile

from property_site.core.config import settings

logger = logging.getLogger(__name__)


def generate_upload_filename(original_filename: str | None) -> str:
    """Build `<epoch-ms>-<random int>.<ext>` for a stored upload.

    The random part makes collisions unlikely, not impossible.
    """
    ext = os.path.splitext(original_filename or "")[1]
    suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{suffix}{ext}"


def upload_path(filename: str) -> str:
    return os.path.join(settings.UPLOAD_DIR, os.path.basename(filename))


def upload_url(filename: str) -> str:
    return f"{settings.UPLOAD_URL_PREFIX}/{filename}"


def save_upload(file: UploadFile) -> str:
    """Write the uploaded file into the upload directory and return its new name."""
    filename = generate_upload_filename(file.filename)
    path = upload_path(filename)

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    with open(path, "wb") as buffer:
        shutil.copyfileobj(file.file, buffer)

    logger.info("upload_saved filename=%s original=%r", filename, file.filename)
    return filename


def remove_upload(filename: str) -> None:
    path = upload_path(filename)
    try:
        os.remove(path)
    except FileNotFoundError:
        return None
    logger.info("upload_removed filename=%s", filename)
