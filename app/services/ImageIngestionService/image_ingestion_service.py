from __future__ import annotations

import asyncio
import base64
import logging

from app.components.preview.preview_store import PreviewStore
from app.entities.image import EncodedImage, SelectedFile
from app.services.ImageIngestionService.image_ingestion_service_interface import (
    ImageIngestionServiceInterface,
)


class ImageIngestionError(Exception):
    """Base error for image selection failures."""


class InvalidFileTypeError(ImageIngestionError):
    def __init__(self, mime_type: str | None) -> None:
        self.mime_type = mime_type
        super().__init__(f"Unsupported mime type: {mime_type}")


class ImageTooLargeError(ImageIngestionError):
    def __init__(self, size_bytes: int, max_bytes: int) -> None:
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        super().__init__(
            f"Image exceeds size limit: {size_bytes} bytes (max {max_bytes})"
        )


class ImageReadError(ImageIngestionError):
    """Raised when the selected file cannot be read or is empty."""


class ImageIngestionService(ImageIngestionServiceInterface):
    IMAGE_MIME_PREFIX: str = "image/"

    def __init__(
        self,
        preview_store: PreviewStore,
        logger: logging.Logger,
        max_image_bytes: int = 10 * 1024 * 1024,
    ) -> None:
        self.preview_store = preview_store
        self.logger = logger
        self.max_image_bytes = max_image_bytes
        self._current: EncodedImage | None = None

    @property
    def current(self) -> EncodedImage | None:
        return self._current

    async def ingest(self, file: SelectedFile) -> EncodedImage:
        mime_type = file.mime_type or ""
        if not mime_type.startswith(self.IMAGE_MIME_PREFIX):
            self.logger.info("Rejected non-image file with mime type: %s", mime_type)
            raise InvalidFileTypeError(file.mime_type)

        data = await self._read_bytes(file)
        size_bytes = len(data)

        if size_bytes == 0:
            raise ImageReadError(f"Empty file: {file.path}")

        if size_bytes > self.max_image_bytes:
            self.logger.warning("Rejected oversized image (%s bytes)", size_bytes)
            raise ImageTooLargeError(size_bytes, self.max_image_bytes)

        payload = base64.b64encode(data).decode("ascii")
        preview_handle = self.preview_store.create(data, mime_type)

        previous = self._current
        self._current = EncodedImage(
            payload=payload,
            mime_type=mime_type,
            preview_handle=preview_handle,
            file_name=file.file_name,
            size_bytes=size_bytes,
        )
        if previous is not None:
            self.preview_store.revoke(previous.preview_handle)

        self.logger.info(
            "Ingested image %s (%s, %s bytes)",
            file.file_name or file.path,
            mime_type,
            size_bytes,
        )
        return self._current

    def clear(self) -> None:
        if self._current is None:
            return

        self.preview_store.revoke(self._current.preview_handle)
        self.logger.debug("Cleared image %s", self._current.file_name)
        self._current = None

    async def _read_bytes(self, file: SelectedFile) -> bytes:
        try:
            return await asyncio.to_thread(file.path.read_bytes)
        except (OSError, ValueError) as exc:
            self.logger.warning("Failed to read %s: %s", file.path, exc)
            raise ImageReadError(f"Cannot read file: {file.path}") from exc
