"""
Shared fixtures for the fixer.io client tests.
"""
from unittest.mock import AsyncMock

import httpx
import pytest

from infrastructure.providers import FixerIOProvider


@pytest.fixture
def mock_client():
    """Mock httpx.AsyncClient standing in for the network"""
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def provider(mock_client):
    return FixerIOProvider(client=mock_client)
