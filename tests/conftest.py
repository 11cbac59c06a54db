import logging
from typing import Iterable, List

import pytest


class LineCollector(logging.Handler):
    """Keeps every formatted message emitted to a logger."""

    def __init__(self) -> None:
        super().__init__()
        self.lines: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.lines.append(record.getMessage())


class FakeClock:
    """Returns the given nanosecond readings one after another."""

    def __init__(self, readings: Iterable[int]) -> None:
        self._readings = iter(readings)

    def __call__(self) -> int:
        return next(self._readings)


@pytest.fixture
def collector(request):
    handler = LineCollector()
    logger = logging.getLogger(f"tests.{request.node.name}")
    logger.setLevel(logging.INFO)
    logger.propagate = False
    logger.addHandler(handler)
    handler.logger = logger
    yield handler
    logger.removeHandler(handler)


@pytest.fixture
def fake_clock():
    return FakeClock
