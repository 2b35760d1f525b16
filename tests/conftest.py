"""Shared fixtures."""

import pytest
from pagesmith.errors import PersistenceError
from pagesmith.storage import MemoryAdapter


class FlakyAdapter(MemoryAdapter):
    """MemoryAdapter whose writes can be switched to fail."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_saves = False
        self.fail_deletes = False

    def save(self, category, key, document):
        if self.fail_saves:
            raise PersistenceError(f"disk full while writing {category}/{key}")
        super().save(category, key, document)

    def delete(self, category, key):
        if self.fail_deletes:
            raise PersistenceError(f"permission denied removing {category}/{key}")
        super().delete(category, key)


@pytest.fixture
def adapter() -> MemoryAdapter:
    return MemoryAdapter()


@pytest.fixture
def flaky_adapter() -> FlakyAdapter:
    return FlakyAdapter()
