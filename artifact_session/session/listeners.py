"""Repository listeners: event logging and listener chaining."""

from typing import Iterable, List

from ..common.logger import get_logger

logger = get_logger("repository_events")

# Event types worth surfacing above DEBUG
WARNING_EVENTS = ("ARTIFACT_DESCRIPTOR_INVALID", "ARTIFACT_DESCRIPTOR_MISSING")
INFO_EVENTS = ("METADATA_INVALID", "ARTIFACT_INSTALLED", "METADATA_INSTALLED")


class LoggingRepositoryListener:
    """Logs repository events raised during resolution."""

    def __init__(self, event_logger=None):
        self.logger = event_logger or logger

    def on_event(self, event) -> None:
        target = event.artifact or (event.repository.id if event.repository else "")
        message = f"{event.type}: {target}"
        if event.exception is not None:
            message = f"{message} ({event.exception})"

        if event.type in WARNING_EVENTS:
            self.logger.warning(message)
        elif event.type in INFO_EVENTS:
            self.logger.info(message)
        else:
            self.logger.debug(message)


class ListenerChain:
    """Dispatches each event to every listener in order.

    Also serves as the default event dispatcher: ``chain_listener``
    returns a chain of the registered spies followed by the listener.
    """

    def __init__(self, listeners: Iterable = ()):
        self.listeners: List = list(listeners)

    def chain_listener(self, listener) -> "ListenerChain":
        return ListenerChain(self.listeners + [listener])

    def on_event(self, event) -> None:
        for listener in self.listeners:
            try:
                listener.on_event(event)
            except Exception as e:
                logger.warning(f"Repository listener {type(listener).__name__} failed: {e}")
