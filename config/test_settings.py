# config/test_settings.py

import tempfile

from .settings import *

# =============================================
# TEST-SPECIFIC SETTINGS
# =============================================

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

USE_SPACES = False
MEDIA_ROOT = tempfile.mkdtemp(prefix='dreamedge-media-')

# Remove WhiteNoise middleware
MIDDLEWARE = [m for m in MIDDLEWARE if 'whitenoise' not in m.lower()]

# Faster password hashing
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
ADMIN_EMAIL = 'admin@dreamedge.test'

DEBUG = False
