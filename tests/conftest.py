"""Shared pytest fixtures for hotelvisits tests."""
import sys
sys.dont_write_bytecode = True

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    """Clock pinned to FIXED_NOW."""
    from hotelvisits.infra.time import fixed_clock

    return fixed_clock(FIXED_NOW)


@pytest.fixture
def stores(clock):
    """Three empty stores sharing the fixed clock."""
    from hotelvisits.infra.stores.bundle import empty_stores

    return empty_stores(clock)


@pytest.fixture
def client(stores, tmp_path):
    """TestClient over an app backed by the empty `stores` fixture."""
    from hotelvisits.api.factory import create_app
    from hotelvisits.infra.settings import Settings

    app = create_app(settings=Settings(data_dir=tmp_path), stores=stores)
    return TestClient(app)
