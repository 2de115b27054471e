import os
import random
import string
from threading import Lock
from locust import HttpUser, task, between


API_KEY = os.environ.get("API_KEY", "your-secret-api-key")
CATEGORIES = ["electronics", "kitchen", "garden", "toys"]

_ids_lock = Lock()
_ids = []


def _rand_word() -> str:
    return "".join(random.choice(string.ascii_lowercase) for _ in range(6))


def _rand_product() -> dict:
    return {
        "name": "prod-" + _rand_word(),
        "description": "load test item " + _rand_word(),
        "price": round(random.uniform(1.0, 100.0), 2),
        "category": random.choice(CATEGORIES),
        "inStock": random.random() < 0.7,
    }


def _pick_id():
    with _ids_lock:
        return random.choice(_ids) if _ids else None


class StoreUser(HttpUser):
    wait_time = between(0.05, 0.15)

    def on_start(self):
        self.client.headers["x-api-key"] = API_KEY

    @task(5)
    def list_products(self):
        params = {"page": random.randint(1, 3), "limit": 5}
        if random.random() < 0.5:
            params["category"] = random.choice(CATEGORIES)
        if random.random() < 0.3:
            params["inStock"] = "true"
        self.client.get("/api/products", params=params, name="GET /api/products")

    @task(2)
    def search(self):
        self.client.get(f"/api/products/search/{random.choice(CATEGORIES)}", name="GET /api/products/search/:query")

    @task(1)
    def stats(self):
        self.client.get("/api/products/stats", name="GET /api/products/stats")

    @task(3)
    def create_and_get(self):
        r = self.client.post("/api/products", json=_rand_product(), name="POST /api/products")
        if r.status_code == 201:
            pid = r.json().get("data", {}).get("id")
            if isinstance(pid, str):
                with _ids_lock:
                    _ids.append(pid)
                self.client.get(f"/api/products/{pid}", name="GET /api/products/:id")

    @task(1)
    def update_or_delete(self):
        pid = _pick_id()
        if pid is None:
            return
        if random.random() < 0.5:
            self.client.put(f"/api/products/{pid}", json=_rand_product(), name="PUT /api/products/:id")
        else:
            r = self.client.delete(f"/api/products/{pid}", name="DELETE /api/products/:id")
            if r.status_code in (200, 404):
                with _ids_lock:
                    try:
                        _ids.remove(pid)
                    except ValueError:
                        pass
