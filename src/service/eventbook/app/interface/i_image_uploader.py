from abc import ABC, abstractmethod


class IImageUploader(ABC):
    @abstractmethod
    async def upload(self, *, filename: str, content: bytes) -> str:
        """Store the image and return the URL it is served from."""
        pass
