"""
test_api.py — FastAPI 라우트 (인메모리 저장소 주입).
"""

from odyssey.domain.entities import Profile
from tests.conftest import make_post


class TestHealth:

    async def test_health(self, client):
        r = await client.get("/health")
        assert r.status_code == 200
        assert r.json() == {"status": "ok"}


class TestMapRoute:

    async def test_empty_map_uses_fallbacks(self, client):
        data = (await client.get("/api/map/locations")).json()
        assert data["clusters"] == []
        assert data["center"] == {"latitude": 39.0, "longitude": 35.0}
        assert data["zoom"] == {"lat_delta": 5.0, "lng_delta": 5.0}

    async def test_clusters_serialized(self, client, post_repo):
        post_repo.posts = [
            make_post(lat=30.0, lng=20.0, city="Cairo", country="Egypt"),
            make_post(lat=40.0, lng=24.0, city="Athens", country="Greece"),
        ]
        data = (await client.get("/api/map/locations")).json()
        assert {c["id"] for c in data["clusters"]} == {"Cairo-Egypt", "Athens-Greece"}
        assert data["zoom"] == {"lat_delta": 15.0, "lng_delta": 6.0}
        assert data["clusters"][0]["posts"][0]["location"]["city"] in {"Cairo", "Athens"}

    async def test_backend_failure_is_502(self, client, post_repo):
        post_repo.fail = True
        r = await client.get("/api/map/locations")
        assert r.status_code == 502
        assert "error" in r.json()


class TestSearchRoute:

    async def test_search_sections(self, client, post_repo):
        post_repo.posts = [make_post(location_name="Ayvalık, Turkey")]
        data = (await client.get("/api/search", params={"q": "ay"})).json()
        assert set(data) == {"posts", "users", "locations", "errors"}
        assert data["locations"][0]["name"] == "Ayvalık, Turkey"
        assert data["errors"] == {}

    async def test_partial_failure_reported(self, client, post_repo):
        post_repo.fail = True
        r = await client.get("/api/search", params={"q": "ayse"})
        assert r.status_code == 200
        data = r.json()
        assert data["posts"] == []
        assert len(data["users"]) == 2
        assert set(data["errors"]) == {"posts", "locations"}

    async def test_invalid_sort_is_422(self, client):
        r = await client.get("/api/search", params={"q": "x", "sort_by": "random"})
        assert r.status_code == 422


class TestDiscoverRoutes:

    async def test_trending_locations(self, client, post_repo):
        post_repo.posts = [
            make_post(location_name="A"),
            make_post(location_name="A"),
            make_post(location_name="B", days_ago=6),
        ]
        data = (await client.get("/api/discover/trending-locations")).json()
        assert [(d["name"], d["post_count"]) for d in data] == [("A", 2), ("B", 1)]
        assert data[1]["trend_score"] == 1

    async def test_popular_destinations_include_image(self, client, post_repo):
        post_repo.posts = [make_post(location_name="Rome, Italy", images=["r.jpg"])]
        data = (await client.get("/api/discover/popular-destinations")).json()
        assert data[0]["image_url"] == "r.jpg"
        assert data[0]["city"] == "Rome"

    async def test_recommended_places_shape(self, client, post_repo):
        post_repo.posts = [make_post(location_name="Oslo, Norway", lat=59.9, lng=10.7)]
        data = (await client.get("/api/discover/recommended-places")).json()
        assert data[0]["id"] == "oslo,-norway"
        assert data[0]["location"] == {
            "city": "Oslo", "country": "Norway", "latitude": 59.9, "longitude": 10.7,
        }
        assert set(data[0]) == {"id", "name", "image_url", "post_count", "location"}

    async def test_categories(self, client):
        data = (await client.get("/api/discover/categories")).json()
        assert len(data) == 8
        assert data[0]["id"] == "adventure"

    async def test_suggested_users(self, client, profile_repo):
        profile_repo.profiles.append(Profile(id="u9", username="zeynep", followers_count=999))
        data = (await client.get(
            "/api/discover/suggested-users", params={"exclude_user_id": "u2"}
        )).json()
        assert [u["id"] for u in data] == ["u9", "u1", "u3"]

    async def test_unknown_category_is_422(self, client):
        r = await client.get("/api/posts/category/space")
        assert r.status_code == 422

    async def test_posts_by_location(self, client, post_repo):
        post_repo.posts = [make_post(city="Kaş", country="Turkey"), make_post(city="Rome", country="Italy")]
        data = (await client.get("/api/posts/location/turkey")).json()
        assert [p["location"]["city"] for p in data] == ["Kaş"]


class TestSearchHistoryRoutes:

    async def test_save_list_clear(self, client):
        r = await client.post("/api/users/u1/search-history", json={"query": "Paris"})
        assert r.status_code == 201
        assert r.json()["type"] == "location"

        items = (await client.get("/api/users/u1/search-history")).json()
        assert [i["query"] for i in items] == ["Paris"]

        cleared = (await client.delete("/api/users/u1/search-history")).json()
        assert cleared == {"deleted": 1}

    async def test_delete_item(self, client):
        item = (await client.post(
            "/api/users/u1/search-history", json={"query": "beach", "type": "tag"}
        )).json()
        r = await client.delete(f"/api/search-history/{item['id']}")
        assert r.status_code == 204
        assert (await client.get("/api/users/u1/search-history")).json() == []

    async def test_bad_type_is_422(self, client):
        r = await client.post(
            "/api/users/u1/search-history", json={"query": "x", "type": "hashtag"}
        )
        assert r.status_code == 422


class TestLimitParameters:

    async def test_zero_limit_gives_empty_list(self, client, post_repo):
        post_repo.posts = [make_post(location_name="A"), make_post(location_name="B")]
        r = await client.get("/api/discover/trending-locations", params={"limit": 0})
        assert r.status_code == 200
        assert r.json() == []

    async def test_omitted_limit_uses_default(self, client, post_repo):
        post_repo.posts = [make_post(location_name=f"L{i}") for i in range(12)]
        data = (await client.get("/api/discover/trending-locations")).json()
        assert len(data) == 10

    async def test_negative_limit_is_422(self, client, post_repo):
        post_repo.posts = [
            make_post(location_name="A"),
            make_post(location_name="A"),
            make_post(location_name="B"),
            make_post(location_name="C"),
        ]
        for path in (
            "/api/discover/popular-destinations",
            "/api/discover/trending-locations",
            "/api/discover/recommended-places",
            "/api/discover/trending-posts",
            "/api/discover/suggested-users",
        ):
            r = await client.get(path, params={"limit": -1})
            assert r.status_code == 422, path

    async def test_zero_page_size_is_422(self, client):
        r = await client.get("/api/posts/trending", params={"page_size": 0})
        assert r.status_code == 422

    async def test_negative_page_is_422(self, client):
        r = await client.get("/api/posts/category/food", params={"page": -1})
        assert r.status_code == 422

    async def test_suggested_users_zero_limit(self, client):
        r = await client.get("/api/discover/suggested-users", params={"limit": 0})
        assert r.json() == []

    async def test_history_limit_must_be_positive(self, client):
        r = await client.get("/api/users/u1/search-history", params={"limit": 0})
        assert r.status_code == 422
