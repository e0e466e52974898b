from locust import HttpUser, task, between
import random

SEARCH_TERMS = ["fajront", "šichta", "koniec", "huta", "taśma", "zmiana"]
SLUGS = ["fajront", "šichta", "pyrlik", "huta", "krajzyga"]


class DictionaryReader(HttpUser):
    wait_time = between(1, 2)

    @task(3)
    def search(self):
        self.client.get(
            "/api/search",
            params={"q": random.choice(SEARCH_TERMS), "limit": random.choice([5, 10, 20])},
            headers={"accept": "application/json"}
        )

    @task(2)
    def entry_by_slug(self):
        self.client.get(
            f"/api/dictionary/{random.choice(SLUGS)}",
            headers={"accept": "application/json"},
            name="/api/dictionary/[slug]"
        )

    @task(1)
    def index(self):
        self.client.get("/api/dictionary/index", headers={"accept": "application/json"})

    @task(1)
    def home(self):
        self.client.get("/api/dictionary/featured", headers={"accept": "application/json"})
        self.client.get("/api/dictionary/recent", params={"limit": 5}, headers={"accept": "application/json"})
