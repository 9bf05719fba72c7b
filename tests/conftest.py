"""
Pytest configuration and shared fixtures for DragonBall tests.
"""

import json
import logging
import tempfile
from pathlib import Path
from typing import Iterable

import pytest

from dragonball.client import DragonBallClient, NetworkManager
from dragonball.http import FakeResponse, FakeTransport
from dragonball.logging.manager import logging_manager
from dragonball.models import Hero, Record, Transformation

BASE_URL = "https://dragonball.keepcoding.education"

GOKU_PHOTO = (
    "https://www.mundodeportivo.com/alfabeta/hero/2022/05/"
    "goku-dragon-ball.1651847419.5233.jpg?width=1200"
)


def json_body(records: Iterable[Record]) -> bytes:
    """Encode records the way the service sends them."""
    return json.dumps([record.to_wire() for record in records]).encode("utf-8")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_file(temp_dir):
    """Path to a configuration file inside a fresh directory."""
    config_dir = temp_dir / ".config" / "dragonball"
    config_dir.mkdir(parents=True)
    return config_dir / "config.toml"


@pytest.fixture
def clean_environment(monkeypatch):
    """Ensure no DRAGONBALL_* variable leaks into a test."""
    for var in [
        "DRAGONBALL_BASE_URL", "DRAGONBALL_TIMEOUT", "DRAGONBALL_TOKEN",
        "DRAGONBALL_LOGGING_LEVEL", "DRAGONBALL_LOGGING_FORMAT",
        "DRAGONBALL_LOGGING_OUTPUT", "DRAGONBALL_LOGGING_FILE_PATH",
    ]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def goku():
    return Hero(
        name="Goku",
        id="1",
        description="El goku del carnaval",
        favorite=True,
        photo=GOKU_PHOTO,
    )


@pytest.fixture
def transformation():
    return Transformation(
        name="Hero Name",
        id="Hero ID",
        description="Hero Description",
        photo="Hero Photo",
    )


@pytest.fixture
def fake_transport():
    """A transport with nothing configured; each test installs its handler."""
    return FakeTransport()


@pytest.fixture
def client(fake_transport):
    with DragonBallClient(base_url=BASE_URL, transport=fake_transport) as client:
        yield client


@pytest.fixture
def network_manager(client):
    with NetworkManager(client=client) as manager:
        yield manager


@pytest.fixture
def encode_records():
    """Function encoding records into a JSON array body."""
    return json_body


@pytest.fixture
def respond_with():
    """Build a handler that answers every request with the given body."""
    def factory(body: bytes, status_code: int = 200, url: str = BASE_URL,
                content_type: str = "application/json"):
        metadata = FakeResponse(
            status_code=status_code, headers={"Content-Type": content_type}, url=url
        )
        return lambda request: (metadata, body)
    return factory


@pytest.fixture(autouse=True)
def restore_logging():
    """Remove handlers installed by a test and restore the package logger levels."""
    levels = {
        name: logging.getLogger(name).level
        for name in list(logging.Logger.manager.loggerDict)
        if name.startswith("dragonball")
    }

    yield

    logging_manager.reset()
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("dragonball"):
            logging.getLogger(name).setLevel(levels.get(name, logging.NOTSET))
