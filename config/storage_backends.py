# config/storage_backends.py

from pathlib import Path

from django.conf import settings
from django.core.files.storage import FileSystemStorage
from storages.backends.s3boto3 import S3Boto3Storage


class SupabaseS3Storage(S3Boto3Storage):
    """
    Storage backend for one public Supabase bucket (S3-compatible API).
    Fixes URL generation for public bucket access.
    """

    default_acl = None
    file_overwrite = False
    querystring_auth = False

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('access_key', getattr(settings, 'AWS_ACCESS_KEY_ID', None))
        kwargs.setdefault('secret_key', getattr(settings, 'AWS_SECRET_ACCESS_KEY', None))
        kwargs.setdefault('endpoint_url', getattr(settings, 'AWS_S3_ENDPOINT_URL', None))
        kwargs.setdefault('region_name', getattr(settings, 'AWS_S3_REGION_NAME', None))
        kwargs.setdefault('signature_version', 's3v4')
        super().__init__(*args, **kwargs)
        self.project_ref = getattr(settings, 'SUPABASE_PROJECT_REF', '')

    def url(self, name):
        """
        Generate the public URL for Supabase storage.
        Format: https://{project_ref}.supabase.co/storage/v1/object/public/{bucket}/{path}
        """
        if not name:
            return ''

        name = str(name).lstrip('/')

        return f"https://{self.project_ref}.supabase.co/storage/v1/object/public/{self.bucket_name}/{name}"


def get_bucket_storage(bucket_name):
    """Return the storage for a public image bucket.

    Supabase when USE_SPACES is on, otherwise a local directory per bucket
    under MEDIA_ROOT served from MEDIA_URL.
    """
    if getattr(settings, 'USE_SPACES', False):
        return SupabaseS3Storage(bucket_name=bucket_name)

    media_url = settings.MEDIA_URL.rstrip('/')
    return FileSystemStorage(
        location=Path(settings.MEDIA_ROOT) / bucket_name,
        base_url=f"{media_url}/{bucket_name}/",
    )
