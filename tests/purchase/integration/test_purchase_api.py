"""Integration tests for the purchase endpoints."""


class TestPurchaseEndpoints:
    def test_checkout_cart(self, client, listing, buyer):
        user, headers = buyer
        for product_id in (listing(), listing(title="Lamp", category="Home & Garden", price="25")):
            client.post("/api/cart", json={"user_id": user["id"], "product_id": product_id}, headers=headers)

        response = client.post("/api/purchase", json={"user_id": user["id"]}, headers=headers)
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert len(data["purchases"]) == 2
        assert client.get(f"/api/cart/{user['id']}", headers=headers).json() == []

    def test_checkout_empty_cart(self, client, buyer):
        user, headers = buyer
        response = client.post("/api/purchase", json={"user_id": user["id"]}, headers=headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Cart is empty"}

    def test_buy_now(self, client, listing, buyer):
        user, headers = buyer
        product_id = listing(title="Camera", category="Electronics", price="99")

        response = client.post("/api/purchase", json={"user_id": user["id"], "product_id": product_id}, headers=headers)
        assert response.status_code == 200
        (purchase,) = response.json()["purchases"]
        assert purchase["title"] == "Camera"
        assert purchase["price"] == 99.0

    def test_history_embeds_product(self, client, listing, buyer):
        user, headers = buyer
        product_id = listing()
        client.post("/api/purchase", json={"user_id": user["id"], "product_id": product_id}, headers=headers)

        history = client.get(f"/api/purchase/{user['id']}", headers=headers).json()
        assert len(history) == 1
        assert history[0]["product"]["id"] == product_id

    def test_summary(self, client, listing, buyer):
        user, headers = buyer
        client.post("/api/purchase", json={"user_id": user["id"], "product_id": listing(price="40")}, headers=headers)

        response = client.get(f"/api/purchase/{user['id']}/summary", headers=headers)
        assert response.json() == {"count": 1, "total_spent": 40.0}

    def test_cannot_purchase_for_someone_else(self, client, buyer, signup):
        user, _ = buyer
        _, other_headers = signup(email="mallory@example.com", username="mallory")
        response = client.post("/api/purchase", json={"user_id": user["id"]}, headers=other_headers)
        assert response.status_code == 403
