"""Observer list shared by services that publish events."""

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Keeps a list of observers and calls one named method on each of them.

    The list is copied under the lock and callbacks run outside it, so an
    observer may unregister itself while being notified. A failing observer
    is logged and skipped; the rest are still called.
    """

    def __init__(self, observer_type_name: str = "observer"):
        self._observers: list[T] = []
        self._lock = Lock()
        self._observer_type_name = observer_type_name

    def register(self, observer: T) -> None:
        """Add an observer; registering the same one twice is a no-op."""
        with self._lock:
            if observer in self._observers:
                logger.debug(f"{self._observer_type_name} observer already registered: {observer}")
                return
            self._observers.append(observer)
        logger.info(f"Registered {self._observer_type_name} observer: {observer}")

    def unregister(self, observer: T) -> None:
        with self._lock:
            if observer not in self._observers:
                logger.warning(
                    f"Attempted to unregister unknown {self._observer_type_name} observer: {observer}"
                )
                return
            self._observers.remove(observer)
        logger.debug(f"Unregistered {self._observer_type_name} observer: {observer}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """Call ``callback_name(*args, **kwargs)`` on every registered observer."""
        with self._lock:
            observers = list(self._observers)

        for observer in observers:
            try:
                getattr(observer, callback_name)(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error notifying {self._observer_type_name} observer {observer} via {callback_name}: {e}",
                    exc_info=True,
                )
