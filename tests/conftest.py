from datetime import datetime
from unittest.mock import MagicMock

import pytest

from lunchly.models.daos.customer_dao import CustomerDAO
from lunchly.models.daos.reservation_dao import ReservationDAO


@pytest.fixture
def db():
    """Stands in for DBManager: no rows, inserts return id 1 unless a test says otherwise."""
    manager = MagicMock()
    manager.fetch_all.return_value = []
    manager.fetch_one.return_value = None
    manager.execute_query.return_value = 1
    return manager


@pytest.fixture
def reservation_dao(db):
    return ReservationDAO(db)


@pytest.fixture
def customer_dao(db, reservation_dao):
    return CustomerDAO(db, reservation_dao=reservation_dao)


def customer_row(id=1, first_name="Ada", last_name="Lovelace", phone="555", notes="", **extra):
    row = {"id": id, "first_name": first_name, "last_name": last_name, "phone": phone, "notes": notes}
    row.update(extra)
    return row


def reservation_row(id=1, customer_id=1, num_guests=2, start_at=None, notes=""):
    return {
        "id": id,
        "customer_id": customer_id,
        "num_guests": num_guests,
        "start_at": start_at or datetime(2021, 3, 3, 17, 30),
        "notes": notes,
    }


def normalized(query):
    return " ".join(query.split())
