# database.py

from sqlite3 import connect, Connection

from order_api.logger import log_info

# Establish database connection
def create_connection(db_file: str) -> Connection:
    """ Create a database connection to the SQLite database specified by db_file. """
    conn = connect(db_file, check_same_thread=False)
    conn.execute("PRAGMA foreign_keys = ON")
    log_info(f"Connected to database: {db_file}")
    return conn

# Create tables if they don't exist
def create_tables(conn: Connection):
    """ Create tables for orders and order items. """
    cursor = conn.cursor()
    cursor.execute(
        """
        CREATE TABLE IF NOT EXISTS orders (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            order_id TEXT NOT NULL UNIQUE,
            customer_name TEXT NOT NULL,
            email TEXT,
            name TEXT NOT NULL,
            status TEXT NOT NULL,
            order_date TEXT NOT NULL
        )
        """
    )

    cursor.execute(
        """
        CREATE TABLE IF NOT EXISTS order_items (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            order_id TEXT NOT NULL REFERENCES orders(order_id),
            name TEXT NOT NULL,
            qty INTEGER NOT NULL,
            price REAL NOT NULL
        )
        """
    )
    conn.commit()
    log_info("Tables created successfully.")

# Check whether an order_id is already taken
def order_exists(order_id: str, conn: Connection) -> bool:
    cursor = conn.cursor()
    cursor.execute("SELECT 1 FROM orders WHERE order_id = ?", (order_id,))
    return cursor.fetchone() is not None

# Insert order into orders table
def insert_order(order_id: str, customer_name: str, email: str | None, name: str, status: str, order_date: str, conn: Connection):
    """ Insert order into orders table. The caller commits. """
    cursor = conn.cursor()
    cursor.execute(
        """
        INSERT INTO orders (order_id, customer_name, email, name, status, order_date)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        (order_id, customer_name, email, name, status, order_date),
    )

# Insert one line of an order into order_items table
def insert_order_item(order_id: str, name: str, qty: int, price: float, conn: Connection):
    """ Insert order item into order_items table. The caller commits. """
    cursor = conn.cursor()
    cursor.execute(
        """
        INSERT INTO order_items (order_id, name, qty, price)
        VALUES (?, ?, ?, ?)
        """,
        (order_id, name, qty, price),
    )

# Retrieve order details by order_id
def get_order_by_id(order_id: str, conn: Connection):
    """ Retrieve order details by order_id. """
    cursor = conn.cursor()
    cursor.execute(
        "SELECT order_id, customer_name, name, status, order_date FROM orders WHERE order_id = ?",
        (order_id,),
    )
    return cursor.fetchone()

# Retrieve every order in creation order
def get_all_orders(conn: Connection):
    cursor = conn.cursor()
    cursor.execute(
        "SELECT order_id, customer_name, name, status, order_date FROM orders ORDER BY id"
    )
    return cursor.fetchall()

# Retrieve the lines of one order in the order they were placed
def get_items_for_order(order_id: str, conn: Connection):
    cursor = conn.cursor()
    cursor.execute(
        "SELECT name, qty, price FROM order_items WHERE order_id = ? ORDER BY id",
        (order_id,),
    )
    return cursor.fetchall()
