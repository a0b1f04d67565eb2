import logging
import os
import sys

import mysql.connector

from lunchly.database.db_manager import DBManager

SQL_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sql")


def seed_database(db=None, with_sample_data=True):
    """Recreates the Lunchly tables and optionally loads the sample data."""
    db = db or DBManager()

    print(f"Connecting to database {db.config.database}@{db.config.host}...")
    db.execute_sql_script(os.path.join(SQL_DIR, "schema.sql"))
    if with_sample_data:
        db.execute_sql_script(os.path.join(SQL_DIR, "seed_data.sql"))
    print("Database seeded successfully!")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        seed_database(with_sample_data="--schema-only" not in sys.argv)
    except mysql.connector.Error as err:
        print(f"Error: {err}")
        sys.exit(1)
