"""
Domain model for a user-selected file.
Holds name, byte size and a lazy reader for the raw content.
"""
import mimetypes
import os
from typing import BinaryIO, Callable, Optional


class SelectedFile:
    """A file chosen by the user for a single submission attempt."""

    def __init__(
        self,
        name: str,
        size: int,
        reader: Callable[[], bytes],
        content_type: Optional[str] = None
    ):
        self.name = name
        self.size = size
        self._reader = reader
        self.content_type = content_type or mimetypes.guess_type(name)[0] or "application/octet-stream"

    @classmethod
    def from_bytes(cls, name: str, content: bytes, content_type: Optional[str] = None) -> "SelectedFile":
        return cls(name=name, size=len(content), reader=lambda: content, content_type=content_type)

    @classmethod
    def from_path(cls, path: str) -> "SelectedFile":
        """Size comes from the filesystem; content is read on demand."""
        def read() -> bytes:
            with open(path, "rb") as f:
                return f.read()

        return cls(name=os.path.basename(path), size=os.path.getsize(path), reader=read)

    @classmethod
    def from_stream(
        cls,
        name: str,
        stream: BinaryIO,
        size: int,
        content_type: Optional[str] = None
    ) -> "SelectedFile":
        def read() -> bytes:
            stream.seek(0)
            return stream.read()

        return cls(name=name, size=size, reader=read, content_type=content_type)

    def read(self) -> bytes:
        """Read the raw content. May raise OSError."""
        return self._reader()

    def __repr__(self):
        return f"SelectedFile(name={self.name}, size={self.size}, content_type={self.content_type})"
