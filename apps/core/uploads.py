"""
Local file storage for admin uploads.

Files land in ``settings.PUBLIC_ROOT`` (``images/<kind>/`` or ``videos/``)
and records store the public path, e.g. ``/images/carousels/banner-1700000000000-42.png``.
Deleting is best-effort: a missing file or a filesystem error is logged and
never blocks the database mutation that triggered it.
"""
from __future__ import annotations

import logging
import os
import random
import re
import time
from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import FileSystemStorage
from rest_framework.exceptions import ValidationError

logger = logging.getLogger(__name__)

MB = 1024 * 1024

IMAGE_TYPES = ('jpeg', 'jpg', 'png', 'gif', 'webp', 'svg')
VIDEO_TYPES = ('mp4', 'webm', 'ogg', 'mov', 'avi')


@dataclass(frozen=True)
class UploadKind:
    subdir: str
    types: tuple[str, ...]
    max_bytes: int
    label: str
    # images must match on both extension and mime type; videos on either
    strict: bool = True


PRODUCT_IMAGE = UploadKind('images/products', IMAGE_TYPES, 10 * MB, 'image')
CAROUSEL_IMAGE = UploadKind('images/carousels', IMAGE_TYPES, 50 * MB, 'image')
COMPANY_IMAGE = UploadKind('images/company', IMAGE_TYPES, 50 * MB, 'image')
CARD_IMAGE = UploadKind('images/cards', IMAGE_TYPES, 50 * MB, 'image')
VIDEO_FILE = UploadKind('videos', VIDEO_TYPES, 200 * MB, 'video', strict=False)

_CLEAN_RE = re.compile(r'[^a-zA-Z0-9-]')


def public_storage() -> FileSystemStorage:
    return FileSystemStorage(location=str(settings.PUBLIC_ROOT), base_url='/')


def is_external(path: str | None) -> bool:
    return bool(path) and (path.startswith('http') or path.startswith('data:'))


def unique_filename(original: str) -> str:
    name, ext = os.path.splitext(os.path.basename(original or 'upload'))
    clean = _CLEAN_RE.sub('-', name).lower() or 'file'
    suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10 ** 9)}"
    return f"{clean}-{suffix}{ext.lower()}"


def _matches(kind: UploadKind, uploaded) -> bool:
    ext = os.path.splitext(uploaded.name or '')[1].lower().lstrip('.')
    content_type = (getattr(uploaded, 'content_type', '') or '').lower()
    ext_ok = ext in kind.types
    mime_ok = any(t in content_type for t in kind.types)
    if kind.strict:
        return ext_ok and mime_ok
    return ext_ok or mime_ok or content_type.startswith(f'{kind.label}/')


def validate_upload(uploaded, kind: UploadKind) -> None:
    if not _matches(kind, uploaded):
        raise ValidationError(f"Only {kind.label} files are allowed ({', '.join(kind.types)})")
    if uploaded.size is not None and uploaded.size > kind.max_bytes:
        raise ValidationError(f"File too large (max {kind.max_bytes // MB}MB)")


def save_upload(uploaded, kind: UploadKind) -> str:
    """Validate and store an uploaded file; returns its public path."""
    validate_upload(uploaded, kind)
    name = public_storage().save(f"{kind.subdir}/{unique_filename(uploaded.name)}", uploaded)
    public_path = '/' + name.replace(os.sep, '/').lstrip('/')
    logger.info('Stored upload %s (%s bytes)', public_path, uploaded.size)
    return public_path


def remove_public_file(path: str | None, default_subdir: str = '') -> bool:
    """Best-effort delete of a stored public file. Returns True when a file was removed."""
    if not path or is_external(path):
        return False
    relative = path.lstrip('/') if path.startswith('/') else f"{default_subdir}/{path}".lstrip('/')
    storage = public_storage()
    try:
        if not storage.exists(relative):
            logger.info('Public file already gone: %s', path)
            return False
        storage.delete(relative)
    except (OSError, SuspiciousFileOperation) as exc:
        logger.warning('Failed to delete public file %s: %s', path, exc)
        return False
    logger.info('Deleted public file %s', path)
    return True
