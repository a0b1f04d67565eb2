from lunchly.exceptions import InvalidStateError


class Customer:
    """
    Data Transfer Object for Customer Entity.

    `id` is assigned by the database on insert and cannot be changed afterwards.
    """
    def __init__(self, id=None, first_name=None, last_name=None, phone=None, notes=None, num_reservations=None):
        self._id = id
        self.first_name = first_name
        self.last_name = last_name
        self.phone = phone
        self.notes = notes
        # Only filled in by CustomerDAO.best_customers()
        self.num_reservations = num_reservations

    @classmethod
    def from_row(cls, row):
        """Builds a Customer from a dictionary cursor row."""
        return cls(
            id=row['id'],
            first_name=row['first_name'],
            last_name=row['last_name'],
            phone=row['phone'],
            notes=row['notes'],
            num_reservations=row.get('num_reservations'),
        )

    @property
    def id(self):
        return self._id

    def mark_saved(self, new_id):
        """Records the id generated by the insert. Allowed once."""
        if self._id is not None:
            raise InvalidStateError(f"Customer already has id {self._id}")
        self._id = new_id

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    @property
    def notes(self):
        return self._notes

    @notes.setter
    def notes(self, value):
        self._notes = value if value else ''

    def __repr__(self):
        return f"<Customer {self._id} {self.full_name}>"
