from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_db():
    """DBManager double; transaction() works as a context manager."""
    return MagicMock()
