import os
import uuid
import logging
from typing import Optional

import boto3
from botocore.exceptions import ClientError
from supabase import Client

from app.config import settings
from app.core.errors import UploadError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
    "image/svg+xml": ".svg",
}

# Path prefix per record type; buckets may also differ via settings.storage_buckets
ENTITY_PREFIXES = {
    "team": "team",
    "clients": "clients",
    "portfolio": "portfolio",
    "gallery": "gallery",
    "hero": "hero",
    "careers": "careers",
}


class S3Storage:
    def __init__(self):
        if not settings.s3_enabled:
            raise ValueError("AWS S3 credentials and bucket name must be configured")

        self.s3_client = boto3.client(
            's3',
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            region_name=settings.aws_region
        )
        self.bucket_name = settings.s3_bucket_name

    def upload_file(self, file_content: bytes, key: str, content_type: str) -> str:
        """Upload file to S3 and return its public URL"""
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=file_content,
                ContentType=content_type
            )
        except ClientError as e:
            logger.error(f"Failed to upload file to S3: {str(e)}")
            raise
        return f"https://{self.bucket_name}.s3.{settings.aws_region}.amazonaws.com/{key}"


def build_object_key(entity: str, filename: Optional[str], content_type: str) -> str:
    if entity not in ENTITY_PREFIXES:
        raise ValueError(f"Unknown upload target: {entity}")
    extension = os.path.splitext(filename or "")[1].lower() or ALLOWED_IMAGE_TYPES.get(content_type, "")
    return f"{ENTITY_PREFIXES[entity]}/{uuid.uuid4()}{extension}"


class ImageStorage:
    def __init__(self, supabase: Client, s3_storage: Optional[S3Storage] = None):
        self.supabase = supabase
        self.s3_storage = s3_storage
        if self.s3_storage is None and settings.s3_enabled:
            try:
                self.s3_storage = S3Storage()
            except Exception as e:
                logger.warning(f"S3 storage initialization failed ({str(e)}), will use Supabase Storage")
                self.s3_storage = None

    def upload_image(self, content: bytes, filename: Optional[str], content_type: str, entity: str) -> str:
        """Store an image under a random key and return its public URL. No retry."""
        key = build_object_key(entity, filename, content_type)
        if self.s3_storage:
            logger.info(f"Uploading to S3: {key}")
            try:
                return self.s3_storage.upload_file(content, key, content_type)
            except Exception as e:
                raise UploadError(f"Failed to upload image: {str(e)}")

        bucket = settings.bucket_for(entity)
        logger.info(f"Uploading to Supabase Storage: {bucket}/{key}")
        try:
            storage = self.supabase.storage.from_(bucket)
            storage.upload(key, content, file_options={"content-type": content_type})
            public_url = storage.get_public_url(key)
        except Exception as e:
            logger.error(f"Supabase Storage upload failed: {str(e)}")
            raise UploadError(f"Failed to upload image: {str(e)}")
        return public_url.rstrip("?")
