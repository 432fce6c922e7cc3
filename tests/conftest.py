import os
import sys

import pytest

# Add the project src directory to PYTHONPATH for tests
CURRENT_DIR = os.path.dirname(__file__)
SRC_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "src"))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from hotelres.adapters import SQLiteSnapshotAdapter  # noqa: E402
from hotelres.services import HotelSystem, SimulatedPaymentProcessor  # noqa: E402


def make_db_url(tmpdir) -> str:
    db_path = os.path.join(str(tmpdir), "hotelres_test.db")
    return f"sqlite:///{db_path}"


@pytest.fixture
def adapter(tmp_path):
    db = SQLiteSnapshotAdapter(make_db_url(tmp_path))
    db.init()
    return db


@pytest.fixture
def system(adapter):
    hotel = HotelSystem(adapter, payment_processor=SimulatedPaymentProcessor(delay_seconds=0))
    hotel.load()
    return hotel
