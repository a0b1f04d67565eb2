"""
File: restaurant_service.py
Purpose: Service Layer for the restaurant front desk (customers and their reservations).
"""
from datetime import datetime

from lunchly.exceptions import InvalidArgumentError
from lunchly.models.daos.customer_dao import CustomerDAO
from lunchly.models.daos.reservation_dao import ReservationDAO
from lunchly.models.entities.customer import Customer
from lunchly.models.entities.reservation import Reservation

# Formats accepted for the reservation form's start time, tried in order
START_AT_FORMATS = ('%Y-%m-%d %I:%M %p', '%Y-%m-%d %H:%M')


def parse_start_at(value):
    """Turns the start time typed in a form into a datetime."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise InvalidArgumentError(f"start_at must be text or a datetime, got {value!r}")
    text = value.strip()
    for fmt in START_AT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise InvalidArgumentError(f"Unrecognised start time: {value!r}") from None


class RestaurantService:
    """
    Orchestrates the customer and reservation DAOs for the web layer.
    Form data is any mapping (e.g. Flask's request.form).
    """
    def __init__(self, db_manager):
        self.reservation_dao = ReservationDAO(db_manager)
        self.customer_dao = CustomerDAO(db_manager, reservation_dao=self.reservation_dao)

    # --- Customers ---
    def list_customers(self, search=None):
        """All customers, or only those matching `search` when it is given."""
        if search:
            return self.customer_dao.search(search)
        return self.customer_dao.list_all()

    def get_customer_detail(self, customer_id):
        """Returns (customer, reservations). Raises NotFoundError for an unknown id."""
        customer = self.customer_dao.get_by_id(customer_id)
        reservations = self.customer_dao.get_reservations(customer)
        return customer, reservations

    def get_best_customers(self):
        return self.customer_dao.best_customers()

    def add_customer(self, form_data):
        """
        Creates a customer.
        Expected keys: first_name, last_name, and optionally phone, notes
        """
        customer = Customer(
            first_name=form_data['first_name'],
            last_name=form_data['last_name'],
            phone=form_data.get('phone') or None,
            notes=form_data.get('notes'),
        )
        self.customer_dao.create(customer)
        return customer

    def edit_customer(self, customer_id, form_data):
        """Overwrites the editable fields of an existing customer."""
        customer = self.customer_dao.get_by_id(customer_id)
        customer.first_name = form_data['first_name']
        customer.last_name = form_data['last_name']
        customer.phone = form_data.get('phone') or None
        customer.notes = form_data.get('notes')
        self.customer_dao.update(customer)
        return customer

    # --- Reservations ---
    def add_reservation(self, customer_id, form_data):
        """
        Books a reservation for an existing customer.
        Expected keys: num_guests, start_at, and optionally notes
        """
        # Unknown customers surface as NotFoundError rather than an FK violation
        customer = self.customer_dao.get_by_id(customer_id)

        # Only form text is converted; other values go to the Reservation setter as given
        num_guests = form_data['num_guests']
        if isinstance(num_guests, str):
            try:
                num_guests = int(num_guests.strip())
            except ValueError:
                raise InvalidArgumentError(f"Invalid number of guests: {num_guests!r}") from None

        reservation = Reservation(
            customer_id=customer.id,
            num_guests=num_guests,
            start_at=parse_start_at(form_data['start_at']),
            notes=form_data.get('notes'),
        )
        self.reservation_dao.create(reservation)
        return reservation
