"""
Order Flow Simulation Script

Drives a running server through the dish and order lifecycle, then
fires a burst of concurrent orders.
Run from project root: python scripts/simulate.py

Version: 1.0.0
"""

import argparse
import asyncio
import random
import sys
import time
from datetime import datetime
from typing import Any, Optional

import httpx

# Configuration
API_BASE_URL = "http://localhost:5000"
TOTAL_ORDERS = 50

STREETS = ["Main St", "Broadway", "5th Avenue", "Park Ave", "Madison Ave", "Lexington Ave", "Amsterdam Ave"]
MENU = [
    {"name": "Pizza Margherita", "description": "Tomato, mozzarella, basil", "price": 15},
    {"name": "Caesar Salad", "description": "Romaine, parmesan, croutons", "price": 9},
    {"name": "Pasta Carbonara", "description": "Egg, pecorino, guanciale", "price": 14},
    {"name": "Tiramisu", "description": "Coffee-soaked ladyfingers", "price": 8},
]


def generate_order_payload(dish_ids: list[str], status: Optional[str] = None) -> dict[str, Any]:
    """Generate a random order body referencing existing dishes."""
    data: dict[str, Any] = {
        "deliverTo": f"{random.randint(1, 999)} {random.choice(STREETS)}",
        "mobileNumber": f"555-{random.randint(100, 999)}-{random.randint(1000, 9999)}",
        "dishes": [
            {"id": dish_id, "quantity": random.randint(1, 3)}
            for dish_id in random.sample(dish_ids, k=random.randint(1, len(dish_ids)))
        ],
    }
    if status:
        data["status"] = status
    return {"data": data}


def report(label: str, response: httpx.Response, expected: int) -> bool:
    """Print one check line and return whether the status matched."""
    ok = response.status_code == expected
    mark = "OK  " if ok else "FAIL"
    detail = "" if response.status_code == 204 else response.text[:100]
    print(f"   [{mark}] {label}: {response.status_code} {detail}")
    return ok


# =============================================================================
# LIFECYCLE WALKTHROUGH
# =============================================================================

async def test_single_flows(client: httpx.AsyncClient) -> tuple[bool, list[str]]:
    """
    Exercise every endpoint once, including the error paths.

    Returns:
        Whether every check passed, and the ids of the dishes created
    """
    print("\n" + "=" * 70)
    print("TESTING INDIVIDUAL FLOWS")
    print("=" * 70)

    results = []

    print("\n1. Health Check...")
    response = await client.get("/health")
    results.append(report("GET /health", response, 200))
    if response.status_code != 200:
        return False, []

    print("\n2. Dishes...")
    dish_ids = []
    for dish in MENU:
        body = {"data": {**dish, "image_url": f"https://example.com/{dish['name'].lower().replace(' ', '-')}.jpg"}}
        response = await client.post("/dishes", json=body)
        results.append(report(f"POST /dishes {dish['name']}", response, 201))
        if response.status_code == 201:
            dish_ids.append(response.json()["data"]["id"])
    if not dish_ids:
        return False, []

    response = await client.post("/dishes", json={"data": {"name": "Free lunch", "description": "x", "image_url": "u", "price": 0}})
    results.append(report("POST /dishes price 0", response, 400))

    first = dish_ids[0]
    response = await client.put(f"/dishes/{first}", json={"data": {**MENU[0], "id": "other", "image_url": "u"}})
    results.append(report("PUT /dishes mismatched id", response, 400))

    response = await client.put(f"/dishes/{first}", json={"data": {**MENU[0], "image_url": "u", "price": 16}})
    results.append(report("PUT /dishes price change", response, 200))

    response = await client.get("/dishes/does-not-exist")
    results.append(report("GET /dishes unknown id", response, 404))

    print("\n3. Order status workflow...")
    response = await client.post("/orders", json=generate_order_payload(dish_ids, "pending"))
    results.append(report("POST /orders", response, 201))
    if response.status_code != 201:
        return False, dish_ids
    order = response.json()["data"]

    for status in ("preparing", "out-for-delivery", "delivered"):
        body = {"data": {**order, "status": status}}
        response = await client.put(f"/orders/{order['id']}", json=body)
        results.append(report(f"PUT /orders -> {status}", response, 200))

    response = await client.put(f"/orders/{order['id']}", json={"data": {**order, "status": "pending"}})
    results.append(report("PUT /orders delivered -> pending", response, 400))

    response = await client.delete(f"/orders/{order['id']}")
    results.append(report("DELETE /orders delivered", response, 400))

    print("\n4. Pending order deletion...")
    response = await client.post("/orders", json=generate_order_payload(dish_ids))
    results.append(report("POST /orders", response, 201))
    if response.status_code == 201:
        order_id = response.json()["data"]["id"]
        response = await client.delete(f"/orders/{order_id}")
        results.append(report("DELETE /orders pending", response, 204))
        response = await client.get(f"/orders/{order_id}")
        results.append(report("GET /orders deleted", response, 404))

    response = await client.post("/orders", json={"data": {"deliverTo": "x", "mobileNumber": "1", "dishes": []}})
    results.append(report("POST /orders no dishes", response, 400))

    print("\n" + "=" * 70)
    return all(results), dish_ids


# =============================================================================
# CONCURRENT ORDER BURST
# =============================================================================

async def send_order(client: httpx.AsyncClient, order_num: int, dish_ids: list[str]) -> dict[str, Any]:
    """Place one random order and time it."""
    start_time = time.time()
    try:
        response = await client.post("/orders", json=generate_order_payload(dish_ids), timeout=30.0)
        elapsed = round(time.time() - start_time, 3)
        if response.status_code == 201:
            return {"order_num": order_num, "success": True, "order_id": response.json()["data"]["id"], "time": elapsed}
        return {"order_num": order_num, "success": False, "error": response.text[:100], "time": elapsed}
    except httpx.HTTPError as e:
        elapsed = round(time.time() - start_time, 3)
        return {"order_num": order_num, "success": False, "error": str(e)[:100], "time": elapsed}


async def run_simulation(client: httpx.AsyncClient, dish_ids: list[str], num_orders: int = TOTAL_ORDERS) -> dict[str, Any]:
    """
    Fire ``num_orders`` orders concurrently and check they all landed.

    Args:
        client: Client bound to the API base URL
        dish_ids: Dishes to reference in line items
        num_orders: Number of orders to place
    """
    print("=" * 70)
    print("CONCURRENT ORDER BURST")
    print("=" * 70)
    print(f"Total Orders: {num_orders}")
    print(f"Target: {client.base_url}")
    print(f"Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    before = len((await client.get("/orders")).json()["data"])
    start_time = time.time()
    results = await asyncio.gather(*[send_order(client, i + 1, dish_ids) for i in range(num_orders)])
    total_time = round(time.time() - start_time, 2)
    after = len((await client.get("/orders")).json()["data"])

    successful = [r for r in results if r["success"]]
    failed = [r for r in results if not r["success"]]
    unique_ids = {r["order_id"] for r in successful}

    print(f"\nSuccessful Orders: {len(successful)}/{num_orders}")
    print(f"Failed Orders: {len(failed)}/{num_orders}")
    print(f"Distinct ids: {len(unique_ids)}")
    print(f"Orders listed: {before} -> {after}")
    print(f"Total Time: {total_time}s")

    if successful:
        avg_time = round(sum(r["time"] for r in successful) / len(successful), 3)
        print(f"   Average Response: {avg_time}s")
        print(f"   Fastest: {min(r['time'] for r in successful)}s")
        print(f"   Slowest: {max(r['time'] for r in successful)}s")

    if failed:
        print("\nFailed Order Details (showing first 5):")
        for f in failed[:5]:
            print(f"   Order #{f['order_num']}: {f.get('error', 'Unknown error')}")

    print("=" * 70)

    return {
        "total": num_orders,
        "successful": len(successful),
        "failed": len(failed),
        "consistent": after - before == len(successful) == len(unique_ids),
        "total_time": total_time,
    }


async def main(base_url: str, num_orders: int, skip_tests: bool) -> int:
    async with httpx.AsyncClient(base_url=base_url) as client:
        ok, dish_ids = await test_single_flows(client)
        if not ok and not skip_tests:
            print("\nPre-flight checks failed. Fix issues before running the burst.")
            return 1
        if not dish_ids:
            dish_ids = [d["id"] for d in (await client.get("/dishes")).json()["data"]]
        if not dish_ids:
            print("\nNo dishes available to order.")
            return 1
        summary = await run_simulation(client, dish_ids, num_orders)
    return 0 if summary["failed"] == 0 and summary["consistent"] else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Order Flow Simulation Script")
    parser.add_argument("--url", default=API_BASE_URL, help="API base URL")
    parser.add_argument("--orders", type=int, default=TOTAL_ORDERS, help="Number of orders")
    parser.add_argument("--skip-tests", action="store_true", help="Run the burst even if pre-flight checks fail")
    args = parser.parse_args()

    sys.exit(asyncio.run(main(args.url, args.orders, args.skip_tests)))
