"""
Static Image Uploader - stores event images under the app's /static mount

Files are written to <STATIC_DIR>/<EVENT_IMAGE_FOLDER>/<uuid7><suffix> and served
back as /static/<EVENT_IMAGE_FOLDER>/<name>. The client filename only contributes
its extension.
"""

from pathlib import PurePath

import anyio
import uuid_utils

from src.platform.exception.exceptions import DomainError, InfrastructureError
from src.platform.logging.loguru_io import Logger
from src.service.eventbook.app.interface.i_image_uploader import IImageUploader


ALLOWED_IMAGE_SUFFIXES = frozenset({'.jpg', '.jpeg', '.png', '.gif', '.webp', '.svg'})


class StaticImageUploaderImpl(IImageUploader):
    def __init__(self, *, static_dir: str, image_folder: str) -> None:
        self.static_dir = static_dir
        self.image_folder = image_folder

    @Logger.io(truncate_content=True)
    async def upload(self, *, filename: str, content: bytes) -> str:
        suffix = PurePath(filename or '').suffix.lower()
        if suffix not in ALLOWED_IMAGE_SUFFIXES:
            raise DomainError(f'Unsupported image type: {suffix or filename}', 400)

        stored_name = f'{uuid_utils.uuid7()}{suffix}'
        target_dir = anyio.Path(self.static_dir) / self.image_folder

        try:
            await target_dir.mkdir(parents=True, exist_ok=True)
            await (target_dir / stored_name).write_bytes(content)
        except OSError as e:
            raise InfrastructureError(f'Failed to store image: {e}') from e

        Logger.base.info(f'🖼️ [UPLOAD] Stored event image {stored_name} ({len(content)} bytes)')
        return f'/static/{self.image_folder}/{stored_name}'
