from datetime import datetime

import pytest

from conftest import normalized, reservation_row
from lunchly.exceptions import InvalidStateError
from lunchly.models.entities.reservation import Reservation

START = datetime(2021, 3, 3, 17, 30)


def test_get_reservations_for_customer(reservation_dao, db):
    db.fetch_all.return_value = [reservation_row(id=1, notes=None), reservation_row(id=2, num_guests=4)]

    reservations = reservation_dao.get_reservations_for_customer(1)

    query, params = db.fetch_all.call_args.args
    query = normalized(query)
    assert params == (1,)
    assert query.endswith("WHERE customer_id = %s")
    assert "ORDER BY" not in query
    assert [r.id for r in reservations] == [1, 2]
    assert reservations[0].notes == ""
    assert reservations[0].start_at == START
    assert all(r.customer_id == 1 for r in reservations)


def test_get_reservations_for_customer_without_any(reservation_dao):
    assert reservation_dao.get_reservations_for_customer(42) == []


def test_create_inserts_and_records_id(reservation_dao, db):
    db.execute_query.return_value = 8
    reservation = Reservation(customer_id=3, num_guests=2, start_at=START, notes=None)

    new_id = reservation_dao.create(reservation)

    query, params = db.execute_query.call_args.args
    assert normalized(query).startswith("INSERT INTO reservations (customer_id, num_guests, start_at, notes)")
    assert params == (3, 2, START, "")
    assert new_id == 8
    assert reservation.id == 8


def test_create_refuses_pending_reservation(reservation_dao, db):
    with pytest.raises(InvalidStateError):
        reservation_dao.create(Reservation(num_guests=2, start_at=START))
    db.execute_query.assert_not_called()


def test_create_refuses_saved_reservation(reservation_dao, db):
    with pytest.raises(InvalidStateError):
        reservation_dao.create(Reservation(id=4, customer_id=1, num_guests=2, start_at=START))
    db.execute_query.assert_not_called()


def test_update_writes_all_fields_by_id(reservation_dao, db):
    reservation = Reservation(id=4, customer_id=1, num_guests=2, start_at=START)
    reservation.num_guests = 6
    reservation.notes = "moved to patio"

    reservation_dao.update(reservation)

    query, params = db.execute_query.call_args.args
    query = normalized(query)
    assert query.startswith("UPDATE reservations")
    assert query.endswith("WHERE id = %s")
    assert params == (1, 6, START, "moved to patio", 4)


def test_update_requires_id(reservation_dao, db):
    with pytest.raises(InvalidStateError):
        reservation_dao.update(Reservation(customer_id=1, num_guests=2, start_at=START))


def test_update_refuses_pending_reservation(reservation_dao, db):
    with pytest.raises(InvalidStateError):
        reservation_dao.update(Reservation(id=4, num_guests=2, start_at=START))
    db.execute_query.assert_not_called()


def test_save_dispatches_on_id(reservation_dao, db):
    db.execute_query.return_value = 11
    reservation = Reservation(customer_id=1, num_guests=2, start_at=START)

    reservation_dao.save(reservation)
    reservation_dao.save(reservation)

    first, second = [normalized(c.args[0]) for c in db.execute_query.call_args_list]
    assert first.startswith("INSERT")
    assert second.startswith("UPDATE")
    assert reservation.id == 11
