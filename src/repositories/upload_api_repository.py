"""
Upload API Repository for backend HTTP operations.
Sends encoded files to the parser backend and fetches the user list.
"""
from typing import Any, Dict, List, Optional
import httpx
from pydantic import ValidationError
from src.core import config
from src.core.exceptions import UploadTransportException, UserFetchException
from src.models.dto.upload_dto import UploadRequest, UploadSuccessBody, UploadErrorBody
from src.models.upload_outcome import UploadOutcome


class UploadApiRepository:
    """Repository for the upload backend's HTTP endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url or config.settings.upload_api_base_url
        self.upload_path = config.settings.upload_endpoint_path
        self.users_path = config.settings.users_endpoint_path
        self.timeout = config.settings.upload_api_timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport
        )

    async def upload(self, encoded_file: str, file_name: str) -> UploadOutcome:
        """
        POST an encoded file to the backend parser.

        Args:
            encoded_file: Base64 file content
            file_name: Original file name

        Returns:
            UploadOutcome with transactions on 2xx, errors otherwise

        Raises:
            UploadTransportException: On network failure or an unreadable response body
        """
        request = UploadRequest(file=encoded_file, file_name=file_name)

        try:
            async with self._client() as client:
                response = await client.post(
                    self.upload_path,
                    json=request.model_dump(by_alias=True)
                )
            data = response.json()
        except httpx.HTTPError as e:
            raise UploadTransportException(f"Failed to reach upload backend: {str(e)}") from e
        except ValueError as e:
            raise UploadTransportException(f"Upload backend returned invalid JSON: {str(e)}") from e

        try:
            if response.is_success:
                body = UploadSuccessBody.model_validate(data or {})
                return UploadOutcome.success(response.status_code, body.transactions)

            body = UploadErrorBody.model_validate(data or {})
            return UploadOutcome.failure(response.status_code, body.errors)
        except ValidationError as e:
            raise UploadTransportException(f"Unexpected upload response body: {str(e)}") from e

    async def fetch_users(self) -> List[Dict[str, Any]]:
        """
        GET the user list, always bypassing caches.

        Raises:
            UserFetchException: If the request fails or returns a non-2xx status
        """
        try:
            async with self._client() as client:
                response = await client.get(
                    self.users_path,
                    headers={'Content-Type': 'application/json', 'Cache-Control': 'no-store'}
                )
        except httpx.HTTPError as e:
            raise UserFetchException(f"Failed to fetch data: {str(e)}") from e

        if not response.is_success:
            raise UserFetchException("Failed to fetch data")

        try:
            data = response.json()
        except ValueError as e:
            raise UserFetchException(f"Failed to fetch data: {str(e)}") from e

        if not isinstance(data, dict):
            raise UserFetchException("Failed to fetch data: unexpected response body")

        return data.get('users') or []
