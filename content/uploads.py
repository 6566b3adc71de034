"""
Image uploads for the admin forms.

Each content area owns a public bucket (``settings.STORAGE_BUCKETS``). Files
land under ``<folder>/<epoch_ms>_<random>.<ext>`` and are referenced from
content rows by their public URL.
"""
import logging
import os
import secrets
import time

from django.conf import settings

from config.storage_backends import get_bucket_storage

logger = logging.getLogger(__name__)


class ImageUploadError(Exception):
    """The storage backend refused an upload or delete."""


class ImageTooLarge(ImageUploadError):
    pass


class ImageUploader:

    def __init__(self, bucket, folder='', max_size_mb=None):
        self.bucket = bucket
        self.folder = folder.strip('/')
        self.max_size_mb = max_size_mb or settings.IMAGE_UPLOAD_MAX_MB
        self._storage = None

    @property
    def storage(self):
        if self._storage is None:
            self._storage = get_bucket_storage(self.bucket)
        return self._storage

    @property
    def max_size_bytes(self):
        return self.max_size_mb * 1024 * 1024

    def check_size(self, file):
        if file.size > self.max_size_bytes:
            raise ImageTooLarge(f'Image is too large. Maximum size is {self.max_size_mb}MB.')

    def build_name(self, original_name):
        ext = os.path.splitext(original_name)[1].lstrip('.').lower() or 'png'
        stamp = int(time.time() * 1000)
        name = f"{stamp}_{secrets.token_hex(4)}.{ext}"
        return f"{self.folder}/{name}" if self.folder else name

    def public_url(self, name):
        url = self.storage.url(name)
        if url.startswith('/'):
            # Local storage hands back a path; content rows store absolute URLs
            url = f"{settings.SITE_URL.rstrip('/')}{url}"
        return url

    def upload(self, file):
        """Store ``file`` and return ``(public_url, file_name)``."""
        self.check_size(file)

        name = self.build_name(file.name)
        try:
            saved_name = self.storage.save(name, file)
        except Exception as exc:
            logger.error("Upload to bucket %s failed: %s", self.bucket, exc)
            raise ImageUploadError(f'Upload failed: {exc}') from exc

        url = self.public_url(saved_name)
        logger.info("Uploaded %s to bucket %s", saved_name, self.bucket)
        return url, saved_name

    def name_from_url(self, value):
        """Object name inside the bucket for a stored name or a public URL."""
        marker = f"/{self.bucket}/"
        if marker in value:
            return value.split(marker, 1)[1]
        return value.lstrip('/')

    def owns(self, url):
        """True when ``url`` points into this uploader's bucket."""
        return bool(url) and f"/{self.bucket}/" in url

    def remove(self, name_or_url):
        if not name_or_url:
            return
        name = self.name_from_url(name_or_url)
        try:
            self.storage.delete(name)
        except Exception as exc:
            logger.error("Removing %s from bucket %s failed: %s", name, self.bucket, exc)
            raise ImageUploadError(f'Remove failed: {exc}') from exc
        logger.info("Removed %s from bucket %s", name, self.bucket)
