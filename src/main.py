"""Entry point — wires Config → Connection → LoggingResponseListener."""
import asyncio
import logging
import sys

from rich.logging import RichHandler

from src.config import Config
from src.constants import MSG_RECOGNIZE_FAILED, MSG_STARTING, MSG_USAGE
from src.dictation.connection import Connection
from src.dictation.listener import LoggingResponseListener

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


async def _run(connection: Connection, audio_file: str) -> int:
    try:
        await connection.recognize(audio_file)
    except OSError as exc:
        logger.error(MSG_RECOGNIZE_FAILED, exc)
        return 1
    finally:
        await connection.close()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    match args:
        case [audio_file]:
            pass
        case _:
            print(MSG_USAGE, file=sys.stderr)
            return 2

    config = Config.from_env()
    _setup_logging(config.log_level)

    connection = Connection.from_config(config)
    logger.info(MSG_STARTING, connection.session.session_id)
    connection.add_response_listener(LoggingResponseListener())
    return asyncio.run(_run(connection, audio_file))


if __name__ == "__main__":
    sys.exit(main())
