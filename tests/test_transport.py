"""Transport tests: external script and HTTP equivalents"""
import asyncio
import stat
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from src.transport.client import Transport, TransportError
from src.transport.http import HttpTransport
from src.transport.script import ScriptTransport

ARGS = [
    "https://example.test/dictation",
    "APP_ID",
    "KEY",
    "A" * 32,
    "audio/x-wav;codec=pcm;bit=16;rate=16000",
    "eng-USA",
    "Dictation",
]


def write_script(tmp_path, body: str):
    script = tmp_path / "transport.sh"
    script.write_text("#!/bin/sh\n" + body)
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    return script


def test_transports_implement_abc():
    assert issubclass(ScriptTransport, Transport)
    assert issubclass(HttpTransport, Transport)


# ── ScriptTransport ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_script_receives_args_in_order(tmp_path):
    script = write_script(tmp_path, 'for a in "$@"; do echo "$a"; done\n')
    audio = tmp_path / "voice.wav"

    output = await ScriptTransport(script).invoke(ARGS + [str(audio)])

    assert output.decode().split("\n")[:-1] == ARGS + [str(audio)]


@pytest.mark.asyncio
async def test_script_stderr_merged_into_output(tmp_path):
    script = write_script(tmp_path, "echo out\necho err >&2\n")

    output = await ScriptTransport(script).invoke([])

    assert b"out" in output
    assert b"err" in output


@pytest.mark.asyncio
async def test_script_runs_in_its_own_directory(tmp_path):
    script = write_script(tmp_path, "pwd\n")

    output = await ScriptTransport(script).invoke([])

    assert output.decode().strip() == str(tmp_path.resolve())


@pytest.mark.asyncio
async def test_script_nonzero_exit_still_returns_output(tmp_path):
    script = write_script(tmp_path, "echo '<title>Error</title>'\nexit 3\n")

    output = await ScriptTransport(script).invoke([])

    assert output == b"<title>Error</title>\n"


@pytest.mark.asyncio
async def test_script_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        await ScriptTransport(tmp_path / "missing.sh").invoke([])


@pytest.mark.asyncio
async def test_relative_script_spawned_by_absolute_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    process = MagicMock()
    process.returncode = 0
    process.communicate = AsyncMock(return_value=(b"hi", None))

    with patch(
        "src.transport.script.asyncio.create_subprocess_exec",
        new=AsyncMock(return_value=process),
    ) as spawn:
        await ScriptTransport("scripts/dictation.sh").invoke(["a"])

    args, kwargs = spawn.call_args
    assert args == (str(tmp_path.resolve() / "scripts" / "dictation.sh"), "a")
    assert kwargs["cwd"] == tmp_path.resolve() / "scripts"


@pytest.mark.asyncio
async def test_script_killed_when_interrupted():
    process = MagicMock()
    process.returncode = None
    process.communicate = AsyncMock(side_effect=asyncio.CancelledError())
    process.wait = AsyncMock()

    with patch(
        "src.transport.script.asyncio.create_subprocess_exec",
        new=AsyncMock(return_value=process),
    ):
        with pytest.raises(asyncio.CancelledError):
            await ScriptTransport("/bin/transport").invoke([])

    process.kill.assert_called_once()
    process.wait.assert_awaited_once()


# ── HttpTransport ─────────────────────────────────────────────────────────────


def make_http(handler) -> HttpTransport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpTransport(timeout=5.0, http_client=client)


@pytest.mark.asyncio
async def test_http_request_shape(tmp_path):
    audio = tmp_path / "voice.wav"
    audio.write_bytes(b"RIFFdata")
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="hello\nworld")

    transport = make_http(handler)
    output = await transport.invoke(ARGS + [str(audio)])
    await transport.close()

    request = seen[0]
    assert output == b"hello\nworld"
    assert request.method == "POST"
    assert request.url.path == "/dictation"
    assert request.url.params["appId"] == "APP_ID"
    assert request.url.params["appKey"] == "KEY"
    assert request.url.params["id"] == "A" * 32
    assert request.headers["Content-Type"] == "audio/x-wav;codec=pcm;bit=16;rate=16000"
    assert request.headers["Accept-Language"] == "eng-USA"
    assert request.headers["Accept-Topic"] == "Dictation"
    assert request.headers["Accept"] == "text/plain"
    assert request.content == b"RIFFdata"


@pytest.mark.asyncio
async def test_http_error_status_returns_page(tmp_path):
    audio = tmp_path / "voice.wav"
    audio.write_bytes(b"x")
    page = "<html><title>Error 401</title></html>"

    transport = make_http(lambda request: httpx.Response(401, text=page))
    output = await transport.invoke(ARGS + [str(audio)])

    assert output == page.encode()


@pytest.mark.asyncio
async def test_http_connection_failure_raises_transport_error(tmp_path):
    audio = tmp_path / "voice.wav"
    audio.write_bytes(b"x")

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(TransportError, match="refused"):
        await make_http(handler).invoke(ARGS + [str(audio)])


@pytest.mark.asyncio
async def test_http_close_without_client_is_noop():
    await HttpTransport(timeout=1.0).close()
