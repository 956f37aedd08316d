"""
Demo Database Bootstrap Script
==============================

Purpose:
--------
Creates the SQLite demo database used by the bundled sql_files/ scripts.

- Creates users, products and orders tables
- Safe to run multiple times
- Does NOT duplicate rows on re-run

Usage:
    python -m src.init_demo_db [db_path]
"""

import sqlite3
import sys
from pathlib import Path
from typing import List, Tuple


# -------------------------------------------------------------------
# Resolve Project Root (robust to execution location)
# -------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parent
if PROJECT_ROOT.name == "src":
    PROJECT_ROOT = PROJECT_ROOT.parent

DEFAULT_DB_PATH = PROJECT_ROOT / "data" / "export_demo.db"


# -------------------------------------------------------------------
# Schema
# -------------------------------------------------------------------

SCHEMA_STATEMENTS: List[str] = [
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL,
        email TEXT NOT NULL UNIQUE,
        age INTEGER,
        created_at TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS products (
        product_id INTEGER PRIMARY KEY,
        product_name TEXT NOT NULL,
        category TEXT NOT NULL,
        price REAL NOT NULL,
        stock_level INTEGER DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS orders (
        order_id INTEGER PRIMARY KEY,
        user_id INTEGER NOT NULL REFERENCES users(id),
        product_id INTEGER NOT NULL REFERENCES products(product_id),
        quantity INTEGER NOT NULL,
        total_amount REAL NOT NULL,
        discount_pct REAL DEFAULT 0,
        order_date TEXT
    )
    """,
]


# -------------------------------------------------------------------
# Seed Data
# -------------------------------------------------------------------

USERS: List[Tuple] = [
    (1, "John Doe", "john@example.com", 30, "2024-01-15"),
    (2, "Jane Smith", "jane@example.com", 25, "2024-02-20"),
    (3, "Ravi Kumar", "ravi@example.com", 41, "2024-03-02"),
    (4, "Anita Rao", "anita@example.com", 35, "2024-03-28"),
]

PRODUCTS: List[Tuple] = [
    (1, "Laptop", "Electronics", 75000.0, 12),
    (2, "Headphones", "Electronics", 2500.0, 140),
    (3, "Desk Chair", "Furniture", 8999.5, 35),
    (4, "Notebook", "Stationery", 45.0, 1200),
]

ORDERS: List[Tuple] = [
    (1, 1, 1, 1, 75000.0, 0.05, "2024-04-01"),
    (2, 2, 2, 3, 7500.0, 0.10, "2024-04-03"),
    (3, 3, 3, 2, 17999.0, 0.0, "2024-04-07"),
    (4, 4, 4, 20, 900.0, 0.15, "2024-04-09"),
    (5, 1, 2, 1, 2500.0, 0.0, "2024-04-12"),
]


# -------------------------------------------------------------------
# Core Logic
# -------------------------------------------------------------------

def init_demo_db(db_path: str | Path = DEFAULT_DB_PATH) -> Path:
    """
    Create tables and seed rows. Existing rows are left untouched.
    """
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(path)
    try:
        for statement in SCHEMA_STATEMENTS:
            conn.execute(statement)
        conn.executemany("INSERT OR IGNORE INTO users VALUES (?, ?, ?, ?, ?)", USERS)
        conn.executemany("INSERT OR IGNORE INTO products VALUES (?, ?, ?, ?, ?)", PRODUCTS)
        conn.executemany("INSERT OR IGNORE INTO orders VALUES (?, ?, ?, ?, ?, ?, ?)", ORDERS)
        conn.commit()
    finally:
        conn.close()

    return path


# -------------------------------------------------------------------
# Entry Point
# -------------------------------------------------------------------

if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_DB_PATH
    created = init_demo_db(target)
    print(f"✅ Demo database ready at: {created}")
