def product_payload(name, category="women"):
    return {
        "name": name,
        "image": "http://testserver/images/product_1.png",
        "category": category,
        "new_price": 50.0,
        "old_price": 80.5,
    }

def add_product(client, name, category="women"):
    response = client.post("/addproduct", json=product_payload(name, category))
    assert response.status_code == 200
    return response.json()


class TestCatalogEndpoints:
    def test_add_product_assigns_sequential_ids(self, client):
        assert add_product(client, "first") == {"success": True, "name": "first"}
        add_product(client, "second")

        products = client.get("/allproducts").json()
        assert [(p["id"], p["name"]) for p in products] == [(1, "first"), (2, "second")]

    def test_removed_id_is_not_reused(self, client):
        add_product(client, "first")
        add_product(client, "second")

        response = client.post("/removeproduct", json={"id": 1, "name": "first"})
        assert response.json() == {"success": True, "name": "first"}

        add_product(client, "third")
        assert [p["id"] for p in client.get("/allproducts").json()] == [2, 3]

    def test_remove_missing_product_succeeds(self, client):
        response = client.post("/removeproduct", json={"id": 99})

        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_product_fields(self, client):
        add_product(client, "dress")

        product = client.get("/allproducts").json()[0]

        assert product["category"] == "women"
        assert product["new_price"] == 50.0
        assert product["old_price"] == 80.5
        assert product["available"] is True
        assert "date" in product

    def test_add_product_missing_fields(self, client):
        response = client.post("/addproduct", json={"name": "x"})

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "category" in response.json()["errors"]
        assert client.get("/allproducts").json() == []

    def test_new_collections(self, client):
        for i in range(10):
            add_product(client, f"p{i + 1}")

        ids = [p["id"] for p in client.get("/newcollections").json()]

        assert ids == [3, 4, 5, 6, 7, 8, 9, 10]

    def test_popular_in_women(self, client):
        add_product(client, "m1", "men")
        for i in range(5):
            add_product(client, f"w{i}", "women")

        names = [p["name"] for p in client.get("/popularinwomen").json()]

        assert names == ["w0", "w1", "w2", "w3"]


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Storefront API is running"

def test_cors_allows_configured_origin_only(client):
    allowed = client.get("/allproducts", headers={"Origin": "http://shop.example.com"})
    denied = client.get("/allproducts", headers={"Origin": "http://evil.example.com"})

    assert allowed.headers["access-control-allow-origin"] == "http://shop.example.com"
    assert "access-control-allow-origin" not in denied.headers
