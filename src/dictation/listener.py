"""Response listeners and the ordered registry that notifies them."""
import logging
import threading
from abc import ABC, abstractmethod

from src.constants import MSG_ERROR_RESPONSE, MSG_HYPOTHESIS
from src.dictation.response import Response

logger = logging.getLogger(__name__)


class ResponseListener(ABC):
    @abstractmethod
    def on_response(self, response: Response) -> None:
        """Called once per completed recognition, successful or not."""
        ...


class LoggingResponseListener(ResponseListener):

    def on_response(self, response: Response) -> None:
        match response.was_successful():
            case True:
                list(map(
                    lambda pair: logger.info(MSG_HYPOTHESIS, *pair),
                    enumerate(response.hypotheses, start=1),
                ))
            case False:
                logger.error(MSG_ERROR_RESPONSE, response.error)


class ListenerRegistry:
    """List semantics: duplicates are kept, removal drops the first equal entry.

    All access goes through one reentrant lock, so a listener may add or remove
    listeners from inside ``on_response``; that change applies from the next event.
    """

    def __init__(self) -> None:
        self._listeners: list[ResponseListener] = []
        self._lock = threading.RLock()

    def add(self, listener: ResponseListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove(self, listener: ResponseListener) -> None:
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

    def fire(self, response: Response) -> None:
        with self._lock:
            for listener in tuple(self._listeners):
                listener.on_response(response)
