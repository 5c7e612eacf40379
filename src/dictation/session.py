"""Immutable per-dictation session settings and the transport argument list."""
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from src.constants import REDACTED, SESSION_ID_ALPHABET, SESSION_ID_LENGTH


def create_random_id(rng: Optional[random.Random] = None) -> str:
    """Return a fresh 32-character session id. Not cryptographically strong."""
    source = rng or random
    return "".join(source.choices(SESSION_ID_ALPHABET, k=SESSION_ID_LENGTH))


@dataclass(frozen=True)
class Session:
    endpoint: str
    api_id: str
    api_key: str
    language: str
    topic: str
    content_type: str
    session_id: str = field(default_factory=create_random_id)

    def transport_args(self, audio_path: Path) -> list[str]:
        # Order and count are the contract with the transport collaborator.
        return [
            self.endpoint,
            self.api_id,
            self.api_key,
            self.session_id,
            self.content_type,
            self.language,
            self.topic,
            str(audio_path),
        ]

    def redacted_args(self, audio_path: Path) -> list[str]:
        args = self.transport_args(audio_path)
        args[2] = REDACTED
        return args
