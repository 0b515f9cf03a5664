import logging
from typing import Iterator

import pytest

from tests.helpers import RecordingHasher


@pytest.fixture
def hasher() -> RecordingHasher:
    return RecordingHasher()


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """
    Undo changes made to the logging tree by `logging.config.fileConfig`.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    package_logger = logging.getLogger("starknet_hash")
    package_level = package_logger.level

    yield

    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    package_logger.setLevel(package_level)
