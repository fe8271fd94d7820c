import logging
import mimetypes
import os
import uuid
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from supabase import create_client, Client

from app.config.environments import SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY, MEDIA_BUCKET
from app.utility.video import get_video_duration

logger = logging.getLogger(__name__)


@dataclass
class UploadedMedia:
    url: str
    duration: float = 0


class SupabaseMediaStorage:
    """Media host backed by a public Supabase Storage bucket"""

    def __init__(self, client: Client, bucket: str = MEDIA_BUCKET):
        self.client = client
        self.bucket = bucket

    def upload(self, local_path: str, content_type: str | None = None) -> UploadedMedia | None:
        """
        Upload a local file to the media host

        Args:
            local_path: Path of the file to upload
            content_type: MIME type of the file (guessed from the name if missing)

        Returns:
            UploadedMedia: Public URL and, for videos, the duration in seconds.
            None if the file is missing or the upload failed.
        """
        if not local_path or not os.path.exists(local_path):
            logger.error(f"No file to upload at {local_path}")
            return None

        content_type = content_type or mimetypes.guess_type(local_path)[0] or "application/octet-stream"
        filename = f"{uuid.uuid4().hex}{Path(local_path).suffix}"

        try:
            with open(local_path, "rb") as f:
                self.client.storage.from_(self.bucket).upload(
                    path=filename,
                    file=f.read(),
                    file_options={
                        "content-type": content_type,
                        "upsert": "false"  # Don't overwrite existing files
                    }
                )
            public_url = self.client.storage.from_(self.bucket).get_public_url(filename)
        except Exception as e:
            logger.error(f"Failed to upload to Supabase Storage: {str(e)}")
            return None

        duration = get_video_duration(local_path) if content_type.startswith("video/") else 0
        return UploadedMedia(url=public_url, duration=duration)

    def delete(self, url: str | None) -> bool | None:
        if not url:
            logger.warning("No media url given for deletion")
            return None

        filename = url.split("?")[0].rstrip("/").split("/")[-1]
        try:
            self.client.storage.from_(self.bucket).remove([filename])
            return True
        except Exception as e:
            logger.error(f"Error deleting file from Supabase Storage: {str(e)}")
            return None


@lru_cache(maxsize=1)
def get_media_storage() -> SupabaseMediaStorage:
    if not all([SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY]):
        raise RuntimeError("SUPABASE related environment variable is missing! Set it in your .env file.")
    return SupabaseMediaStorage(create_client(SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY))
