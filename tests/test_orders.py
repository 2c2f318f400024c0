from conftest import assert_bad_request, assert_not_found

ORDER = {
    "bank": "BNI",
    "no_vc": "8808123456789",
    "payment_method": "VirtualAccount",
    "status": "Menunggu_Pembayaran",
    "time": 1652521028791,
    "user_id": "user-1",
    "checkout_items": [{"item_id": "product-1", "amount": 2}],
}

def create(client, **overrides):
    response = client.post("/orders", json={**ORDER, **overrides})
    assert response.status_code == 200
    return response.json()["id"]

def test_create_then_get_order(client):
    order_id = create(client)

    response = client.get(f"/orders/{order_id}")
    assert response.status_code == 200
    assert response.json() == {"id": order_id, **ORDER}

def test_create_order_defaults(client):
    body = dict(ORDER)
    del body["status"]
    del body["time"]
    order_id = client.post("/orders", json=body).json()["id"]

    order = client.get(f"/orders/{order_id}").json()
    assert order["status"] == "Menunggu_Pembayaran"
    assert order["time"] > ORDER["time"]

def test_update_order_status(client):
    order_id = create(client)

    assert client.put(f"/orders/{order_id}", json={"status": "Dikirim"}).status_code == 204

    order = client.get(f"/orders/{order_id}").json()
    assert order["status"] == "Dikirim"
    assert order["bank"] == "BNI"

def test_update_order_allows_any_status_order(client):
    order_id = create(client, status="Sampai")

    assert client.put(f"/orders/{order_id}", json={"status": "Menunggu_Pembayaran"}).status_code == 204
    assert client.get(f"/orders/{order_id}").json()["status"] == "Menunggu_Pembayaran"

def test_update_order_only_accepts_status(client):
    order_id = create(client)

    assert_bad_request(client.put(f"/orders/{order_id}", json={"bank": "BCA"}))
    assert_bad_request(client.put(f"/orders/{order_id}", json={"status": "Dibatalkan"}))
    assert client.get(f"/orders/{order_id}").json()["bank"] == "BNI"

def test_missing_order(client):
    assert_not_found(client.get("/orders/nope"))
    assert_not_found(client.put("/orders/nope", json={"status": "Sampai"}))
    assert_not_found(client.delete("/orders/nope"))

def test_delete_order(client):
    order_id = create(client)

    assert client.delete(f"/orders/{order_id}").status_code == 204
    assert_not_found(client.delete(f"/orders/{order_id}"))

def test_list_orders_by_status_and_user(client):
    waiting = create(client)
    sent = create(client, status="Dikirim")
    other_user = create(client, user_id="user-2", bank="BCA", payment_method="Cash")

    response = client.get("/orders", params={"status": "Dikirim"})
    assert [o["id"] for o in response.json()] == [sent]

    response = client.get("/orders", params={"user_id": "user-1"})
    assert {o["id"] for o in response.json()} == {waiting, sent}

    response = client.get("/orders", params={"bank": "BCA", "payment_method": "Cash"})
    assert [o["id"] for o in response.json()] == [other_user]

def test_list_orders_by_time_window(client):
    create(client, time=1000)
    middle = create(client, time=2000)
    create(client, time=3000)

    response = client.get("/orders", params={"fromDate": 1500, "toDate": 2500})
    assert [o["id"] for o in response.json()] == [middle]

    assert client.get("/orders", params={"fromDate": 5000}).json() == []

def test_list_orders_rejects_unknown_status(client):
    assert_bad_request(client.get("/orders", params={"status": "Hilang"}))

def test_list_orders_skips_malformed_documents(client, store):
    order_id = create(client)
    store.collections["checkoutHistories"]["x1"] = {"bank": "BNI", "status": "Dikirim"}

    response = client.get("/orders")
    assert response.status_code == 200
    assert [o["id"] for o in response.json()] == [order_id]
