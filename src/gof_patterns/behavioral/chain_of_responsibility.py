"""Chain of Responsibility - loggers pass each message down a threshold chain."""

from abc import ABC, abstractmethod
from typing import List, Optional

from gof_patterns.infrastructure.logging import get_logger

logger = get_logger(__name__)

INFO = 1
DEBUG = 2
ERROR = 3


class AbstractLogger(ABC):
    """
    A handler writes a message when its level is at or below the message's
    level, then always hands the message to the next handler.

    Everything written by the chain goes to the shared ``sink`` list,
    so callers can see the order in which handlers fired.
    """

    def __init__(self, level: int, sink: Optional[List[str]] = None):
        self.level = level
        self.sink: List[str] = sink if sink is not None else []
        self._next_logger: Optional['AbstractLogger'] = None

    def set_next_logger(self, next_logger: 'AbstractLogger') -> 'AbstractLogger':
        self._next_logger = next_logger
        return next_logger

    def log_message(self, level: int, message: str) -> List[str]:
        if self.level <= level:
            self.sink.append(self.write(message))
        if self._next_logger is not None:
            logger.debug(
                "Passing message down the chain",
                handler=type(self).__name__,
                next_handler=type(self._next_logger).__name__,
            )
            self._next_logger.log_message(level, message)
        return self.sink

    @abstractmethod
    def write(self, message: str) -> str:
        pass


class ConsoleLogger(AbstractLogger):
    def write(self, message: str) -> str:
        return f"Standard Console::Logger: {message}"


class ErrorLogger(AbstractLogger):
    def write(self, message: str) -> str:
        return f"Error Console::Logger: {message}"


class FileLogger(AbstractLogger):
    def write(self, message: str) -> str:
        return f"File::Logger: {message}"


def get_chain_of_loggers(sink: Optional[List[str]] = None) -> AbstractLogger:
    """Build error -> file -> console, all writing into one sink."""
    sink = sink if sink is not None else []
    error_logger = ErrorLogger(ERROR, sink)
    error_logger.set_next_logger(FileLogger(DEBUG, sink)).set_next_logger(ConsoleLogger(INFO, sink))
    return error_logger


def demo():
    chain = get_chain_of_loggers()
    chain.log_message(INFO, "This is an information.")
    chain.log_message(DEBUG, "This is a debug level information.")
    chain.log_message(ERROR, "This is an error information.")
    return list(chain.sink)
