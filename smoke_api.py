import os
import sys

import requests
from dotenv import load_dotenv

# Load .env file
load_dotenv()


ALIAS_QUERIES = [
    {
        "name": "Simple aliases",
        "sql": "SELECT name AS customer_name, email AS email_address, age AS customer_age FROM users LIMIT 3",
    },
    {
        "name": "Join with aliases",
        "sql": (
            "SELECT u.name AS customer_name, p.product_name AS product_name, "
            "o.total_amount AS order_value, o.order_date AS purchase_date "
            "FROM orders o JOIN users u ON o.user_id = u.id "
            "JOIN products p ON o.product_id = p.product_id LIMIT 3"
        ),
    },
    {
        "name": "Aggregate aliases",
        "sql": (
            "SELECT p.category AS product_category, COUNT(o.order_id) AS total_orders, "
            "SUM(o.total_amount) AS total_revenue FROM orders o "
            "JOIN products p ON o.product_id = p.product_id GROUP BY p.category"
        ),
    },
]


def main():
    base_url = os.getenv("SQLX_BASE_URL", "http://localhost:8000")
    print(f"🚀 Smoke testing SQL Export API at {base_url}\n")

    try:
        health = requests.get(f"{base_url}/health", timeout=10)
    except requests.ConnectionError:
        print("❌ API is not reachable. Start it with: uvicorn src.app.main:app")
        sys.exit(1)

    print("🔢 Health:", health.status_code, health.json())

    failures = 0
    for test in ALIAS_QUERIES:
        print(f"\n📋 Testing: {test['name']}")

        response = requests.post(f"{base_url}/api/query", json={"sql": test["sql"]}, timeout=30)
        if response.status_code != 200:
            print("❌ Query failed:", response.text)
            failures += 1
            continue
        print("✅ JSON columns:", response.json()["columns"])

        excel = requests.post(
            f"{base_url}/api/query",
            json={"sql": test["sql"], "download": True},
            timeout=30
        )
        if excel.status_code == 200:
            print(f"✅ Excel generated: {len(excel.content)} bytes")
        else:
            print("❌ Excel export failed:", excel.text)
            failures += 1

    script = requests.post(
        f"{base_url}/api/scripts",
        json={"KeyFileName": "product_report", "Params": {"download": True}},
        timeout=30
    )
    print(f"\n📦 product_report.xlsx: {script.status_code}, {len(script.content)} bytes")
    if script.status_code != 200:
        failures += 1

    if failures:
        print(f"\n❌ {failures} check(s) failed")
        sys.exit(1)
    print("\n✅ All checks passed")


if __name__ == "__main__":
    main()
