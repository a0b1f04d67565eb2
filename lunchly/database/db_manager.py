"""
File: db_manager.py
Purpose: Manages the MySQL connection pool and executes queries.
"""
import logging

import mysql.connector
from mysql.connector import pooling

from lunchly.config import get_config

logger = logging.getLogger(__name__)


class DBManager:
    """
    Handles database connections via a connection pool.

    One instance is created by the application and handed to every DAO.
    Every call borrows a connection from the pool and returns it before
    the call ends. Errors from the driver are re-raised after rollback.
    """

    def __init__(self, config=None):
        self.config = config or get_config()
        self._connection_pool = None

    def _initialize_pool(self):
        """Initializes the connection pool with database configuration."""
        if self._connection_pool is None:
            self._connection_pool = pooling.MySQLConnectionPool(
                pool_name=self.config.pool_name,
                pool_size=self.config.pool_size,
                pool_reset_session=True,
                **self.config.connection_args()
            )
            logger.info("Connection pool %s created (size %s)", self.config.pool_name, self.config.pool_size)
        return self._connection_pool

    def get_connection(self):
        """Retrieves a connection from the pool."""
        return self._initialize_pool().get_connection()

    def execute_query(self, query, params=None):
        """
        Executes INSERT or UPDATE queries and commits.

        Returns:
            int: the generated id for an INSERT, the affected row count otherwise.
        """
        connection = self.get_connection()
        cursor = connection.cursor(dictionary=True)
        try:
            logger.debug("execute: %s %r", " ".join(query.split()), params)
            cursor.execute(query, params or ())
            connection.commit()
            if query.strip().upper().startswith("INSERT"):
                return cursor.lastrowid
            return cursor.rowcount
        except mysql.connector.Error:
            connection.rollback()
            raise
        finally:
            cursor.close()
            connection.close()

    def fetch_all(self, query, params=None):
        """Executes a SELECT query and returns all rows as a list of dictionaries."""
        connection = self.get_connection()
        cursor = connection.cursor(dictionary=True)
        try:
            logger.debug("fetch_all: %s %r", " ".join(query.split()), params)
            cursor.execute(query, params or ())
            return cursor.fetchall()
        finally:
            cursor.close()
            connection.close()

    def fetch_one(self, query, params=None):
        """Executes a SELECT query and returns a single row, or None."""
        connection = self.get_connection()
        cursor = connection.cursor(dictionary=True)
        try:
            logger.debug("fetch_one: %s %r", " ".join(query.split()), params)
            cursor.execute(query, params or ())
            # Read the whole result so the pooled connection is left clean
            rows = cursor.fetchall()
            return rows[0] if rows else None
        finally:
            cursor.close()
            connection.close()

    def execute_sql_script(self, file_path):
        """
        Parses and executes a multi-statement SQL script file.
        Statements are split on ';' and committed together at the end.

        Returns:
            int: number of statements executed.
        """
        logger.info("Reading SQL script: %s", file_path)
        with open(file_path, 'r', encoding='utf-8') as f:
            sql_script = f.read()

        connection = self.get_connection()
        cursor = connection.cursor()
        count = 0
        try:
            for statement in sql_script.split(';'):
                if statement.strip():
                    cursor.execute(statement)
                    count += 1
            connection.commit()
        except mysql.connector.Error:
            connection.rollback()
            raise
        finally:
            cursor.close()
            connection.close()

        logger.info("Executed %s SQL statements from %s", count, file_path)
        return count
