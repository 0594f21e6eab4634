"""
Logging infrastructure.

One-time root configuration for the API process, and an
adapter that prefixes messages with the current execution id.
"""
import logging
from typing import Any, MutableMapping, Tuple

from core.domain.value_objects import ExecutionID

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure the root logger once for the process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


class ExecutionLogger(logging.LoggerAdapter):
    """Prefixes every message with `[<execution id>]`."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        return f"[{self.extra['execution_id']}] {msg}", kwargs


def bind_execution(logger: logging.Logger, execution_id: ExecutionID) -> ExecutionLogger:
    return ExecutionLogger(logger, {"execution_id": str(execution_id)})
