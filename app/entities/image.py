import mimetypes
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SelectedFile:
    """A file picked by the user. Only the mime type and bytes are consumed."""

    path: Path
    mime_type: str
    file_name: str | None = None

    @classmethod
    def from_path(cls, path: str | Path, mime_type: str | None = None) -> "SelectedFile":
        resolved = Path(path)
        try:
            resolved = resolved.expanduser()
        except RuntimeError:
            # Unknown ~user prefix: keep the literal path, reading it fails later
            pass
        if mime_type is None:
            guessed, _ = mimetypes.guess_type(resolved.name)
            mime_type = guessed or "application/octet-stream"
        return cls(path=resolved, mime_type=mime_type, file_name=resolved.name)


@dataclass(frozen=True)
class EncodedImage:
    """Base64 image payload ready for a JSON request body."""

    payload: str
    mime_type: str
    preview_handle: str
    file_name: str | None
    size_bytes: int
