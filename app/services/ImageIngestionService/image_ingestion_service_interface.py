from abc import ABC, abstractmethod

from app.entities.image import EncodedImage, SelectedFile


class ImageIngestionServiceInterface(ABC):
    @property
    @abstractmethod
    def current(self) -> EncodedImage | None:
        """The image currently selected, if any."""

    @abstractmethod
    async def ingest(self, file: SelectedFile) -> EncodedImage:
        """
        Encode the selected file and allocate a preview handle for it.

        Replaces (and releases) any previously ingested image.

        Raises:
            InvalidFileTypeError: The declared mime type is not an image type.
            ImageTooLargeError: The file exceeds the configured size limit.
            ImageReadError: The file is empty or cannot be read.
        """

    @abstractmethod
    def clear(self) -> None:
        """Release the current preview handle and forget the selection."""
