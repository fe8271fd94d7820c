import os
import shutil
import tempfile
import uuid
from pathlib import Path

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from app.utility.exception import InternalError
from app.utility.storage import UploadedMedia

CHUNK_SIZE = 1024 * 1024


def has_file(file: UploadFile | None) -> bool:
    return file is not None and bool(file.filename)


async def upload_form_file(storage, file: UploadFile, label: str) -> UploadedMedia:
    """
    Spool a multipart file to disk and hand it to the media host

    The temporary copy is removed whether or not the upload succeeds.

    Raises:
        InternalError: If the media host did not accept the file
    """
    temp_dir = tempfile.mkdtemp()
    temp_path = os.path.join(temp_dir, f"{uuid.uuid4().hex}{Path(file.filename or '').suffix}")

    try:
        with open(temp_path, "wb") as buffer:
            while chunk := await file.read(CHUNK_SIZE):
                buffer.write(chunk)

        uploaded = await run_in_threadpool(storage.upload, temp_path, file.content_type)
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)

    if not uploaded or not uploaded.url:
        raise InternalError(f"Something went wrong while uploading {label}")
    return uploaded


async def delete_media(storage, url: str | None):
    if url:
        await run_in_threadpool(storage.delete, url)
