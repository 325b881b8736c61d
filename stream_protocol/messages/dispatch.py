"""Exhaustive handler dispatch over a message family."""

from typing import Any, Callable, Mapping

from ..logging import get_logger
from .base import MessageFamily, MessageVariant

logger = get_logger(__name__)

Handler = Callable[[Any], Any]


class MessageDispatcher:
    """
    Routes decoded messages to one handler per variant.

    Construction fails unless every variant of the family has a handler, so a
    variant added to the protocol cannot be silently dropped by an application.
    """

    def __init__(self, family: MessageFamily,
                 handlers: Mapping[type[MessageVariant], Handler]):
        foreign = [cls for cls in handlers if cls not in family.variants]
        if foreign:
            names = ", ".join(cls.__name__ for cls in foreign)
            raise ValueError(f"Handlers registered for non-{family.name} messages: {names}")

        missing = [cls for cls in family.variants if cls not in handlers]
        if missing:
            names = ", ".join(cls.__name__ for cls in missing)
            raise ValueError(f"No handler for {family.name} messages: {names}")

        self.family = family
        self._handlers = dict(handlers)

    def dispatch(self, message: MessageVariant) -> Any:
        """
        Call the handler registered for the message's variant.

        Raises:
            TypeError: If the message does not belong to this family
        """
        handler = self._handlers.get(type(message))
        if handler is None:
            raise TypeError(
                f"{type(message).__name__} is not a {self.family.name} message"
            )
        logger.debug("Dispatching message", family=self.family.name, tag=message.TAG)
        return handler(message)
