from lunchly.exceptions import InvalidStateError
from lunchly.models.entities.reservation import Reservation


class ReservationDAO:
    """
    Data Access Object for Reservations.

    A reservation is a booked time slot for one customer. This DAO reads the
    reservations of a customer and writes single reservations back; there is
    no delete.
    """

    def __init__(self, db_manager):
        self.db = db_manager

    def get_reservations_for_customer(self, customer_id):
        """Given a customer id, find their reservations (storage order)."""
        query = """
            SELECT id, customer_id, num_guests, start_at, notes
            FROM reservations
            WHERE customer_id = %s
        """
        rows = self.db.fetch_all(query, (customer_id,))
        return [Reservation.from_row(row) for row in rows]

    def create(self, reservation):
        """
        Inserts a new reservation and records the generated id on it.

        Raises:
            InvalidStateError: the reservation already has an id, or is not
                bound to a customer yet.
        """
        if reservation.id is not None:
            raise InvalidStateError(f"Reservation {reservation.id} already exists; use update()")
        if not reservation.is_bound:
            raise InvalidStateError("Reservation has no customer_id")

        query = """
            INSERT INTO reservations (customer_id, num_guests, start_at, notes)
            VALUES (%s, %s, %s, %s)
        """
        params = (reservation.customer_id, reservation.num_guests, reservation.start_at, reservation.notes)
        new_id = self.db.execute_query(query, params)
        reservation.mark_saved(new_id)
        return new_id

    def update(self, reservation):
        """Writes all fields of an existing reservation. Last write wins."""
        if reservation.id is None:
            raise InvalidStateError("Cannot update a reservation that was never saved; use create()")
        if not reservation.is_bound:
            raise InvalidStateError("Reservation has no customer_id")

        query = """
            UPDATE reservations
            SET customer_id = %s, num_guests = %s, start_at = %s, notes = %s
            WHERE id = %s
        """
        params = (reservation.customer_id, reservation.num_guests, reservation.start_at,
                  reservation.notes, reservation.id)
        return self.db.execute_query(query, params)

    def save(self, reservation):
        """Adds or updates a reservation, depending on whether it has an id."""
        if reservation.id is None:
            return self.create(reservation)
        return self.update(reservation)
