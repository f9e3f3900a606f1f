"""Marine tracking load test scenarios.

Read-only traffic against GET /marine-trackings. Runs against a server whose
projections were loaded with ``python src/manage.py seed-demo``.
"""

import random

from locust import HttpUser, between, task

from loadtests.helpers.response import extract_error_detail

# Mirrors tracking.utils.demo_data
DEMO_SHIP_TO_IDS = ["ST-1001", "ST-1002", "ST-1003"]
DEMO_ORDER_IDS = [f"SO-50000{n}" for n in range(1, 7)]


class MarineTrackingUser(HttpUser):
    """A customer portal polling the tracking page of its orders."""

    wait_time = between(0.5, 2.0)

    def on_start(self):
        self.ship_to_ids = random.sample(DEMO_SHIP_TO_IDS, k=random.randint(1, len(DEMO_SHIP_TO_IDS)))

    def _get(self, name, params):
        with self.client.get(
            "/marine-trackings",
            params=params,
            headers={"X-Ship-To-Ids": ",".join(self.ship_to_ids)},
            catch_response=True,
            name=name,
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Marine trackings failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task(5)
    def all_orders(self):
        self._get("GET /marine-trackings", {})

    @task(3)
    def single_order(self):
        self._get("GET /marine-trackings?order_id", {"order_id": random.choice(DEMO_ORDER_IDS)})

    @task(2)
    def all_orders_with_recent_activity(self):
        self._get("GET /marine-trackings?include_recent_activity", {"include_recent_activity": "true"})
