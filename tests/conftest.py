"""
Shared fixtures: one storage instance per backend, on a temporary SQLite file
for the SQL backend.
"""
import os
import shutil
import tempfile

import pytest

from storefront.storage import MemoryStorage, SQLStorage


@pytest.fixture
def temp_dir():
    """Create a temporary directory for database files."""
    path = tempfile.mkdtemp()
    yield path
    shutil.rmtree(path)


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def sqlite_storage(temp_dir):
    """Create a SQL backend on a fresh SQLite file."""
    return SQLStorage(os.path.join(temp_dir, "test.db"))


@pytest.fixture(params=["memory", "sqlite"])
def storage(request):
    """Run the test once per storage backend."""
    return request.getfixturevalue(f"{request.param}_storage")
