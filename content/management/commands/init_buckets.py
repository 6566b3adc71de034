import boto3
from botocore.config import Config
from botocore.exceptions import ClientError
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError


class Command(BaseCommand):
    help = 'Create any missing image buckets in S3-compatible storage'

    def handle(self, *args, **options):
        if not settings.USE_SPACES:
            self.stdout.write('USE_SPACES is off; images are stored under MEDIA_ROOT, nothing to do.')
            return

        client = boto3.client(
            's3',
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            endpoint_url=settings.AWS_S3_ENDPOINT_URL,
            region_name=settings.AWS_S3_REGION_NAME,
            config=Config(signature_version='s3v4'),
        )

        try:
            existing = {b['Name'] for b in client.list_buckets().get('Buckets', [])}
        except ClientError as exc:
            raise CommandError(f'Could not list buckets: {exc}')

        for bucket in settings.STORAGE_BUCKETS:
            if bucket in existing:
                self.stdout.write(f'Bucket exists: {bucket}')
                continue
            try:
                client.create_bucket(Bucket=bucket)
            except ClientError as exc:
                self.stderr.write(self.style.ERROR(f'Failed to create {bucket}: {exc}'))
                continue
            self.stdout.write(self.style.SUCCESS(f'Created bucket: {bucket}'))
