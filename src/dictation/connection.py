"""Connection — one dictation session: upload, classify, notify."""
import logging
import os
from pathlib import Path

from src.config import Config
from src.constants import (
    MSG_AUDIO_MISSING,
    MSG_AUDIO_UNREADABLE,
    MSG_DECODE_FAILED,
    MSG_INVOKING,
    MSG_RECOGNIZED,
    MSG_SERVICE_ERROR,
    OUTPUT_ENCODING,
    TRANSPORT_HTTP,
)
from src.dictation.listener import ListenerRegistry, ResponseListener
from src.dictation.response import Response, parse_response
from src.dictation.session import Session, create_random_id
from src.transport.client import Transport, TransportError
from src.transport.http import HttpTransport
from src.transport.script import ScriptTransport

logger = logging.getLogger(__name__)


# ── pure helpers (module-level so tests can import them directly) ──────────────


def resolve_audio_path(audio_file: str | Path) -> Path:
    path = Path(audio_file).resolve()
    match (path.is_file(), os.access(path, os.R_OK)):
        case (True, True):
            return path
        case (False, _):
            raise FileNotFoundError(MSG_AUDIO_MISSING % path)
        case _:
            raise PermissionError(MSG_AUDIO_UNREADABLE % path)


def decode_output(raw: bytes) -> str:
    try:
        return raw.decode(OUTPUT_ENCODING)
    except UnicodeDecodeError as exc:
        raise TransportError(MSG_DECODE_FAILED % OUTPUT_ENCODING) from exc


# ── connection ────────────────────────────────────────────────────────────────


class Connection:
    """Sends audio to the dictation service and publishes each outcome to listeners.

    A new session id should be used per logical dictation; reusing one across
    unrelated recognitions can collide server-side.
    """

    def __init__(self, session: Session, transport: Transport) -> None:
        self._session = session
        self._transport = transport
        self._listeners = ListenerRegistry()

    @classmethod
    def from_config(cls, config: Config) -> "Connection":
        session = Session(
            endpoint=config.endpoint,
            api_id=config.app_id,
            api_key=config.app_key,
            language=config.language,
            topic=config.topic,
            content_type=config.content_type,
            session_id=config.session_id or create_random_id(),
        )
        match config.transport:
            case t if t == TRANSPORT_HTTP:
                transport: Transport = HttpTransport(config.http_timeout)
            case _:
                transport = ScriptTransport(config.script_path)
        return cls(session, transport)

    @property
    def session(self) -> Session:
        return self._session

    # ── listeners ─────────────────────────────────────────────────────────────

    def add_response_listener(self, listener: ResponseListener) -> None:
        self._listeners.add(listener)

    def remove_response_listener(self, listener: ResponseListener) -> None:
        self._listeners.remove(listener)

    def fire_response_event(self, response: Response) -> None:
        self._listeners.fire(response)

    # ── recognition ───────────────────────────────────────────────────────────

    async def recognize(self, audio_file: str | Path) -> None:
        """Upload one recording (keep it under ~15 s) and notify listeners.

        Service-side errors arrive as a failed Response. Transport failures
        raise and no listener is notified.
        """
        audio_path = resolve_audio_path(audio_file)
        logger.debug(MSG_INVOKING, self._session.redacted_args(audio_path))

        raw = await self._transport.invoke(self._session.transport_args(audio_path))
        response = parse_response(decode_output(raw))

        match response.was_successful():
            case True:
                logger.info(MSG_RECOGNIZED, len(response.hypotheses))
            case False:
                logger.warning(MSG_SERVICE_ERROR)

        self.fire_response_event(response)

    async def close(self) -> None:
        await self._transport.close()
