from pathlib import Path

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.eventbook.driven_adapter.storage.static_image_uploader_impl import (
    StaticImageUploaderImpl,
)


@pytest.mark.unit
class TestStaticImageUploader:
    @pytest.mark.asyncio
    async def test_upload_writes_file_and_returns_public_path(self, tmp_path: Path) -> None:
        uploader = StaticImageUploaderImpl(static_dir=str(tmp_path), image_folder='events')

        url = await uploader.upload(filename='Cover Photo.PNG', content=b'\x89PNG')

        assert url.startswith('/static/events/')
        assert url.endswith('.png')
        stored = tmp_path / 'events' / url.rsplit('/', 1)[1]
        assert stored.read_bytes() == b'\x89PNG'

    @pytest.mark.asyncio
    async def test_unsupported_extension_rejected(self, tmp_path: Path) -> None:
        uploader = StaticImageUploaderImpl(static_dir=str(tmp_path), image_folder='events')

        with pytest.raises(DomainError):
            await uploader.upload(filename='payload.exe', content=b'MZ')

        assert not (tmp_path / 'events').exists()
