"""Response model and the parser that turns raw service output into one."""
from dataclasses import dataclass

from src.constants import ERROR_MARKER, HYPOTHESIS_SEPARATOR


@dataclass(frozen=True)
class Response:
    """Outcome of one recognition round trip.

    Check ``was_successful()`` before reading ``hypotheses``; on an error
    response the raw service output is in ``error`` and ``hypotheses`` is empty.
    """

    hypotheses: tuple[str, ...] = ()
    error: str = ""

    def __post_init__(self) -> None:
        match (self.error, self.hypotheses):
            case ("", _) | (_, ()):
                pass
            case _:
                raise ValueError("An error response cannot carry hypotheses")

    @classmethod
    def success(cls, hypotheses: tuple[str, ...] | list[str]) -> "Response":
        return cls(hypotheses=tuple(hypotheses))

    @classmethod
    def failure(cls, error: str) -> "Response":
        return cls(error=error)

    def was_successful(self) -> bool:
        return self.error == ""


# ── pure helpers ──────────────────────────────────────────────────────────────


def is_error_page(text: str) -> bool:
    return ERROR_MARKER in text


def parse_transcript(text: str) -> Response:
    """One hypothesis per line, verbatim and in server order.

    Trailing empty lines are dropped, so ``"a\\nb\\n"`` gives two hypotheses
    and ``"\\n"`` gives none. Empty text is the exception: it yields a single
    empty hypothesis.
    """
    match text:
        case "":
            return Response.success([""])
        case _:
            body = text.rstrip(HYPOTHESIS_SEPARATOR)
            return Response.success(body.split(HYPOTHESIS_SEPARATOR) if body else [])


def parse_response(text: str) -> Response:
    match is_error_page(text):
        case True:
            return Response.failure(text)
        case False:
            return parse_transcript(text)
