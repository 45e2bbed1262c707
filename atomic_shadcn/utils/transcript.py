from contextlib import contextmanager
from typing import Iterator, List

from loguru import logger


@contextmanager
def capture_transcript(package: str = "atomic_shadcn") -> Iterator[List[str]]:
    """
    Collect every log line emitted by ``package`` while the block runs.

    The lines are plain messages, without level or timestamp, in emission order.
    """
    lines: List[str] = []

    def _sink(message) -> None:
        lines.append(message.record["message"])

    handler_id = logger.add(_sink, level="INFO", filter=package, format="{message}")
    try:
        yield lines
    finally:
        logger.remove(handler_id)
