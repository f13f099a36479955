import sys, os

import pytest

# Ensure src (and the project root for tests.helpers) is on path for test imports
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

from tests.helpers import DEFAULT_TABLES, write_tables


@pytest.fixture
def data_dir(tmp_path):
    """Data directory populated with the default test tables."""
    write_tables(tmp_path, DEFAULT_TABLES)
    return tmp_path
