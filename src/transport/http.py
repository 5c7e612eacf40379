"""HttpTransport posts the audio directly, mirroring what the upload script does."""
import logging
from pathlib import Path
from typing import Optional

import httpx

from src.constants import (
    HTTP_ACCEPT,
    HTTP_HEADER_LANGUAGE,
    HTTP_HEADER_TOPIC,
    HTTP_PARAM_APP_ID,
    HTTP_PARAM_APP_KEY,
    HTTP_PARAM_SESSION_ID,
    MSG_CALLING_HTTP,
    MSG_HTTP_FAILED,
)
from src.transport.client import Transport, TransportError

logger = logging.getLogger(__name__)


class HttpTransport(Transport):
    """Takes the same ordered args as the script and returns the raw body.

    Non-2xx replies are returned as-is: the service reports errors as an HTML
    page, which the caller classifies. Only connection-level failures raise.
    """

    def __init__(self, timeout: float, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self._timeout = timeout
        self._http_client = http_client

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
        return self._http_client

    async def invoke(self, args: list[str]) -> bytes:
        endpoint, app_id, app_key, session_id, content_type, language, topic, audio_path = args
        audio = Path(audio_path).read_bytes()

        logger.info(MSG_CALLING_HTTP, endpoint)
        try:
            response = await self._get_http_client().post(
                endpoint,
                params={
                    HTTP_PARAM_APP_ID: app_id,
                    HTTP_PARAM_APP_KEY: app_key,
                    HTTP_PARAM_SESSION_ID: session_id,
                },
                headers={
                    "Content-Type": content_type,
                    "Accept": HTTP_ACCEPT,
                    HTTP_HEADER_LANGUAGE: language,
                    HTTP_HEADER_TOPIC: topic,
                },
                content=audio,
            )
        except httpx.HTTPError as exc:
            raise TransportError(MSG_HTTP_FAILED % exc) from exc
        return response.content

    async def close(self) -> None:
        match self._http_client:
            case None:
                pass
            case client:
                await client.aclose()
