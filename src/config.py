from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_ENDPOINT,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_LANGUAGE,
    DEFAULT_SCRIPT_PATH,
    DEFAULT_TOPIC,
    TRANSPORT_SCRIPT,
    TRANSPORTS,
)


@dataclass(frozen=True)
class Config:
    endpoint: str
    app_id: str
    app_key: str
    session_id: Optional[str]
    language: str
    topic: str
    content_type: str
    transport: str
    script_path: str
    http_timeout: float
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        endpoint = os.getenv("DICTATION_ENDPOINT", DEFAULT_ENDPOINT)
        app_id = os.getenv("DICTATION_APP_ID")
        app_key = os.getenv("DICTATION_APP_KEY")
        session_id = os.getenv("DICTATION_SESSION_ID") or None
        language = os.getenv("DICTATION_LANGUAGE", DEFAULT_LANGUAGE)
        topic = os.getenv("DICTATION_TOPIC", DEFAULT_TOPIC)
        content_type = os.getenv("DICTATION_CONTENT_TYPE", DEFAULT_CONTENT_TYPE)
        transport = os.getenv("DICTATION_TRANSPORT", TRANSPORT_SCRIPT)
        script_path = os.getenv("DICTATION_SCRIPT_PATH", DEFAULT_SCRIPT_PATH)
        http_timeout = os.getenv("DICTATION_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            endpoint=endpoint,
            app_id=app_id,
            app_key=app_key,
            session_id=session_id,
            language=language,
            topic=topic,
            content_type=content_type,
            transport=transport.strip().lower(),
            script_path=script_path,
            http_timeout=http_timeout,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        endpoint: str,
        app_id: Optional[str],
        app_key: Optional[str],
        session_id: Optional[str],
        language: str,
        topic: str,
        content_type: str,
        transport: str,
        script_path: str,
        http_timeout: str,
        log_level: str,
    ) -> "Config":
        match app_id:
            case None | "":
                raise ValueError("DICTATION_APP_ID must be set in .env")
            case _:
                pass

        match app_key:
            case None | "":
                raise ValueError("DICTATION_APP_KEY must be set in .env")
            case _:
                pass

        match transport:
            case t if t in TRANSPORTS:
                pass
            case _:
                raise ValueError(
                    f"DICTATION_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {transport!r}"
                )

        try:
            timeout = float(http_timeout)
        except ValueError:
            raise ValueError(
                f"DICTATION_HTTP_TIMEOUT must be a number of seconds, got {http_timeout!r}"
            ) from None

        match timeout:
            case t if t > 0:
                pass
            case _:
                raise ValueError(f"DICTATION_HTTP_TIMEOUT must be positive, got {http_timeout!r}")

        return Config(
            endpoint=endpoint,
            app_id=app_id,
            app_key=app_key,
            session_id=session_id,
            language=language,
            topic=topic,
            content_type=content_type,
            transport=transport,
            script_path=script_path,
            http_timeout=timeout,
            log_level=log_level,
        )
