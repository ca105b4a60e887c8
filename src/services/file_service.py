"""
File Service for upload encoding.
Converts selected file content into the Base64 text the backend expects.
"""
import asyncio
import base64
from src.models.selected_file import SelectedFile
from src.core.exceptions import FileEncodingException


class FileService:
    """Service for file encoding operations."""

    DATA_URL_SEPARATOR = ","

    def to_data_url(self, content: bytes, content_type: str) -> str:
        """
        Build a data URL for binary content.

        Args:
            content: Raw file bytes
            content_type: MIME type placed in the data URL header

        Returns:
            Data URL of the form data:<mime>;base64,<payload>
        """
        payload = base64.b64encode(content).decode('ascii')
        return f"data:{content_type};base64,{payload}"

    def strip_data_url(self, data_url: str) -> str:
        """
        Remove the data URL framing and return only the Base64 payload.

        Raises:
            FileEncodingException: If the value carries no framing separator
        """
        header, separator, payload = data_url.partition(self.DATA_URL_SEPARATOR)
        if not separator:
            raise FileEncodingException("Encoded file is missing its data URL header")
        return payload

    async def encode_base64(self, selected_file: SelectedFile) -> str:
        """
        Read a selected file and return its standard Base64 content.

        Args:
            selected_file: File to encode

        Returns:
            Base64 text without any data URL prefix

        Raises:
            FileEncodingException: If the file cannot be read
        """
        try:
            content = await asyncio.to_thread(selected_file.read)
        except (OSError, ValueError) as e:
            raise FileEncodingException(f"Failed to read file {selected_file.name}: {str(e)}") from e

        data_url = self.to_data_url(content, selected_file.content_type)
        return self.strip_data_url(data_url)
