"""
Shared pytest fixtures.
"""

import pytest

from src.init_demo_db import init_demo_db


@pytest.fixture
def demo_db(tmp_path):
    """Fresh seeded SQLite database for one test."""
    return init_demo_db(tmp_path / "export_demo.db")


@pytest.fixture
def demo_rows():
    """Rows mixing naming conventions and value shapes."""
    from datetime import datetime

    return [
        {
            "user_id": 1,
            "full_name": "John Doe",
            "email": "john@example.com",
            "age": 30,
            "Market_Cap_Curr_Display": 1500000,
            "revenue_curr": 250000,
            "growth_rate_pct": 0.15,
            "created_at": datetime(2024, 1, 15),
            "internal_code": "XYZ123",
        },
        {
            "user_id": 2,
            "full_name": "Jane Smith",
            "email": "jane@example.com",
            "age": 25,
            "Market_Cap_Curr_Display": 2300000,
            "revenue_curr": 380000,
            "growth_rate_pct": 0.22,
            "created_at": datetime(2024, 2, 20),
            "internal_code": "ABC456",
        },
    ]
