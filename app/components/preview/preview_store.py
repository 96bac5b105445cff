import uuid


class PreviewStore:
    """
    In-memory registry of image previews.

    A handle lets the presentation layer render an ingested image without
    reading the file again. Handles stay valid until revoked.
    """

    _PREFIX = "blob:"

    def __init__(self) -> None:
        self._previews: dict[str, tuple[bytes, str]] = {}

    def create(self, data: bytes, mime_type: str) -> str:
        handle = f"{self._PREFIX}{uuid.uuid4()}"
        self._previews[handle] = (data, mime_type)
        return handle

    def resolve(self, handle: str) -> tuple[bytes, str]:
        """Return ``(data, mime_type)``; raises KeyError for revoked handles."""
        if handle not in self._previews:
            raise KeyError(f"Preview handle {handle} is not active")
        return self._previews[handle]

    def revoke(self, handle: str) -> None:
        self._previews.pop(handle, None)

    def is_active(self, handle: str) -> bool:
        return handle in self._previews

    @property
    def active_handles(self) -> list[str]:
        return list(self._previews)
