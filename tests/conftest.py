"""
Pytest configuration and fixtures.
"""

import os
import tempfile
from typing import List

import pytest

from chargex.config import Config, MongoDBConfig
from chargex.model import ChargeEntry, CodeGroup, Statute


@pytest.fixture
def sample_config():
    """Return a sample configuration."""
    return Config()


@pytest.fixture
def mongodb_config():
    """Return a configuration with MongoDB enabled."""
    return Config(
        mongodb=MongoDBConfig(
            enabled=True,
            uri="mongodb://localhost:27017",
            database="test_db",
            citations_collection="test_citations",
            arrests_collection="test_arrests",
        )
    )


@pytest.fixture
def sample_charges_text() -> str:
    """Return charges as an officer would type them."""
    return "evading a peace officer\nreckless driving\nbattery on a police officer\nlittering"


@pytest.fixture
def sample_entries() -> List[ChargeEntry]:
    """Return a list of classified entries."""
    return [
        ChargeEntry(1, "1. Evading a Peace Officer", Statute("2800.2(A)", CodeGroup.VC)),
        ChargeEntry(2, "2. Reckless Driving", Statute("23103", CodeGroup.VC)),
        ChargeEntry(3, "3. Littering"),
    ]


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield tmp_dir


@pytest.fixture
def temp_file():
    """Create a temporary file."""
    with tempfile.NamedTemporaryFile(delete=False) as tmp:
        tmp_path = tmp.name

    yield tmp_path

    # Clean up
    if os.path.exists(tmp_path):
        os.unlink(tmp_path)
