from lunchly.exceptions import InvalidStateError, NotFoundError
from lunchly.models.daos.reservation_dao import ReservationDAO
from lunchly.models.entities.customer import Customer

BEST_CUSTOMERS_LIMIT = 10


class CustomerDAO:
    """
    Data Access Object for Customers of the restaurant.

    Covers:
    1.  **Retrieval**: full listing (by last, then first name) and lookup by id.
    2.  **Search**: case-insensitive substring match on first OR last name.
    3.  **Ranking**: the customers holding the most reservations.
    4.  **Persistence**: explicit create / update, plus save() choosing between them.

    Reservations of a customer are read through ReservationDAO.
    """

    COLUMNS = "c.id, c.first_name, c.last_name, c.phone, c.notes"

    def __init__(self, db_manager, reservation_dao=None):
        self.db = db_manager
        self.reservation_dao = reservation_dao or ReservationDAO(db_manager)

    # =================================================================
    # Part A: Retrieval
    # =================================================================

    def list_all(self):
        """Find all customers."""
        query = f"""
            SELECT {self.COLUMNS}
            FROM customers AS c
            ORDER BY c.last_name, c.first_name
        """
        return [Customer.from_row(row) for row in self.db.fetch_all(query)]

    def get_by_id(self, customer_id):
        """
        Get a customer by id.

        Raises:
            NotFoundError: no such customer (status 404).
        """
        query = f"""
            SELECT {self.COLUMNS}
            FROM customers AS c
            WHERE c.id = %s
        """
        row = self.db.fetch_one(query, (customer_id,))
        if row is None:
            raise NotFoundError(f"No such customer: {customer_id}")
        return Customer.from_row(row)

    def get_reservations(self, customer):
        """Get all reservations for this customer."""
        return self.reservation_dao.get_reservations_for_customer(customer.id)

    # =================================================================
    # Part B: Search & Ranking
    # =================================================================

    def search(self, name_part):
        """
        Customers whose first or last name contains `name_part`, ignoring case.
        An empty string matches everyone.
        """
        # The wildcards travel inside the bound value; placeholders cannot sit inside quotes
        pattern = f"%{name_part}%"
        query = f"""
            SELECT {self.COLUMNS}
            FROM customers AS c
            WHERE LOWER(c.first_name) LIKE LOWER(%s)
               OR LOWER(c.last_name) LIKE LOWER(%s)
        """
        rows = self.db.fetch_all(query, (pattern, pattern))
        return [Customer.from_row(row) for row in rows]

    def best_customers(self):
        """
        The ten customers with the most reservations, most first.
        Customers without reservations never appear (inner join).
        """
        query = f"""
            SELECT {self.COLUMNS}, COUNT(r.id) AS num_reservations
            FROM customers AS c
            JOIN reservations AS r ON c.id = r.customer_id
            GROUP BY c.id
            ORDER BY num_reservations DESC
            LIMIT %s
        """
        rows = self.db.fetch_all(query, (BEST_CUSTOMERS_LIMIT,))
        return [Customer.from_row(row) for row in rows]

    # =================================================================
    # Part C: Persistence
    # =================================================================

    def create(self, customer):
        """Inserts a new customer and records the generated id on it."""
        if customer.id is not None:
            raise InvalidStateError(f"Customer {customer.id} already exists; use update()")

        query = """
            INSERT INTO customers (first_name, last_name, phone, notes)
            VALUES (%s, %s, %s, %s)
        """
        params = (customer.first_name, customer.last_name, customer.phone, customer.notes)
        new_id = self.db.execute_query(query, params)
        customer.mark_saved(new_id)
        return new_id

    def update(self, customer):
        """Writes all fields of an existing customer. Last write wins."""
        if customer.id is None:
            raise InvalidStateError("Cannot update a customer that was never saved; use create()")

        query = """
            UPDATE customers
            SET first_name = %s, last_name = %s, phone = %s, notes = %s
            WHERE id = %s
        """
        params = (customer.first_name, customer.last_name, customer.phone, customer.notes, customer.id)
        return self.db.execute_query(query, params)

    def save(self, customer):
        """Adds or updates a customer, depending on whether it has an id."""
        if customer.id is None:
            return self.create(customer)
        return self.update(customer)
