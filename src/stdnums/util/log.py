import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    LoggerAdapterType = logging.LoggerAdapter[logging.Logger]
else:
    LoggerAdapterType = logging.LoggerAdapter


def logger_for_cls(cls: type[object]) -> logging.Logger:
    return logging.getLogger(f"{cls.__module__}.{cls.__name__}")


LoggerType = logging.Logger | LoggerAdapterType


class LoggerMixin:
    """Mixin that adds a logger with a standardized name"""

    @classmethod
    @functools.cache
    def logger(cls) -> logging.Logger:
        """
        Returns a logger named after the module and name of the class.

        This is cached so that we don't create a new logger every time
        it is called.
        """
        return logger_for_cls(cls)

    @property
    def log(self) -> LoggerType:
        """
        A convenience property that returns the logger for the class,
        so it is easier to access the logger from an instance.
        """
        return self.logger()
