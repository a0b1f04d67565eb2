from datetime import datetime

from lunchly.exceptions import InvalidArgumentError, InvalidStateError

# Month names stay English whatever the process locale is
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _ordinal(day):
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 11 <= day % 100 <= 13:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(day % 10, 'th')
    return f"{day}{suffix}"


class Reservation:
    """
    Data Transfer Object for Reservation Entity.

    Fields are validated when assigned, including inside the constructor:
    - num_guests: an int of at least 1
    - start_at: a datetime (strings and timestamps are refused)
    - customer_id: may be bound once; None means "not bound yet"
    - notes: anything falsy is stored as ''
    """
    def __init__(self, id=None, customer_id=None, num_guests=1, start_at=None, notes=None):
        self._id = id
        self._customer_id = None
        self.customer_id = customer_id
        self.num_guests = num_guests
        self.start_at = start_at
        self.notes = notes

    @classmethod
    def from_row(cls, row):
        """Builds a Reservation from a dictionary cursor row."""
        return cls(
            id=row['id'],
            customer_id=row['customer_id'],
            num_guests=row['num_guests'],
            start_at=row['start_at'],
            notes=row['notes'],
        )

    @property
    def id(self):
        return self._id

    def mark_saved(self, new_id):
        """Records the id generated by the insert. Allowed once."""
        if self._id is not None:
            raise InvalidStateError(f"Reservation already has id {self._id}")
        self._id = new_id

    # --- Validated fields ---

    @property
    def customer_id(self):
        return self._customer_id

    @customer_id.setter
    def customer_id(self, value):
        if self._customer_id is not None:
            raise InvalidStateError("Attempting to reassign customer_id of reservation")
        self._customer_id = value

    @property
    def is_bound(self):
        """True once the reservation belongs to a customer."""
        return self._customer_id is not None

    @property
    def num_guests(self):
        return self._num_guests

    @num_guests.setter
    def num_guests(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"Number of guests must be an integer, got {value!r}")
        if value < 1:
            raise InvalidArgumentError("Invalid number of guests")
        self._num_guests = value

    @property
    def start_at(self):
        return self._start_at

    @start_at.setter
    def start_at(self, value):
        if not isinstance(value, datetime):
            raise InvalidArgumentError("start_at must be a datetime")
        self._start_at = value

    @property
    def notes(self):
        return self._notes

    @notes.setter
    def notes(self, value):
        self._notes = value if value else ''

    # --- Presentation ---

    def formatted_start_at(self):
        """e.g. 'March 3rd 2021, 5:30 pm'"""
        s = self._start_at
        hour = s.hour % 12 or 12
        meridiem = 'am' if s.hour < 12 else 'pm'
        return f"{MONTH_NAMES[s.month - 1]} {_ordinal(s.day)} {s.year}, {hour}:{s.minute:02d} {meridiem}"

    def __repr__(self):
        return f"<Reservation {self._id} customer={self._customer_id} guests={self._num_guests}>"
