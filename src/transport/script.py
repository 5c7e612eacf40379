"""ScriptTransport — runs the external upload script and captures its output."""
import asyncio
import logging
from pathlib import Path

from src.constants import MSG_CALLING_SCRIPT
from src.transport.client import Transport

logger = logging.getLogger(__name__)


class ScriptTransport(Transport):

    def __init__(self, script_path: str | Path) -> None:
        self._script = Path(script_path).resolve()

    async def invoke(self, args: list[str]) -> bytes:
        logger.info(MSG_CALLING_SCRIPT, self._script)
        process = await asyncio.create_subprocess_exec(
            str(self._script),
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
            cwd=self._script.parent,
        )
        try:
            stdout, _ = await process.communicate()
        finally:
            match process.returncode:
                case None:
                    process.kill()
                    await process.wait()
                case _:
                    pass
        return stdout or b""
