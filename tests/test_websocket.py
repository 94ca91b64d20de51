def test_connect_receives_current_state(client):
    created = client.post("/payments", json={"amount": 100.50, "currency": "USD"}).json()

    with client.websocket_connect("/ws") as websocket:
        event = websocket.receive_json()

    assert event == {
        "type": "paymentsUpdated",
        "data": [{"id": created["id"], "amount": 100.50, "currency": "USD"}],
    }


def test_connect_to_empty_store_receives_empty_list(client):
    with client.websocket_connect("/ws") as websocket:
        assert websocket.receive_json() == {"type": "paymentsUpdated", "data": []}


def test_each_mutation_reaches_every_subscriber(client, app):
    with client.websocket_connect("/ws") as first, client.websocket_connect("/ws") as second:
        subscribers = [first, second]
        for websocket in subscribers:
            assert websocket.receive_json()["type"] == "paymentsUpdated"
        assert app.state.container.hub.subscriber_count == 2

        payment_id = client.post("/payments", json={"amount": 10, "currency": "USD"}).json()["id"]
        created = {"id": payment_id, "amount": 10.0, "currency": "USD"}
        for websocket in subscribers:
            assert websocket.receive_json() == {"type": "paymentsUpdated", "data": [created]}
            assert websocket.receive_json() == {"type": "paymentCreated", "data": created}

        client.put(f"/payments/{payment_id}", json={"amount": 250.75, "currency": "EUR"})
        updated = {"id": payment_id, "amount": 250.75, "currency": "EUR"}
        for websocket in subscribers:
            assert websocket.receive_json() == {"type": "paymentsUpdated", "data": [updated]}
            assert websocket.receive_json() == {"type": "paymentUpdated", "data": updated}

        client.delete(f"/payments/{payment_id}")
        for websocket in subscribers:
            assert websocket.receive_json() == {"type": "paymentsUpdated", "data": []}
            assert websocket.receive_json() == {"type": "paymentDeleted", "data": {"id": payment_id}}


def test_failed_mutation_sends_nothing(client):
    with client.websocket_connect("/ws") as websocket:
        websocket.receive_json()

        assert client.delete("/payments/12345").status_code == 404
        client.post("/payments", json={"amount": 1, "currency": "GBP"})

        # The next event must come from the successful create, not the failed delete.
        assert websocket.receive_json()["type"] == "paymentsUpdated"
        assert websocket.receive_json()["type"] == "paymentCreated"


def test_disconnect_removes_subscriber(client, app):
    hub = app.state.container.hub
    with client.websocket_connect("/ws") as websocket:
        websocket.receive_json()
        assert hub.subscriber_count == 1

    client.get("/payments")
    assert hub.subscriber_count == 0


def test_inbound_frames_are_ignored(client, app):
    with client.websocket_connect("/ws") as websocket:
        websocket.receive_json()
        websocket.send_bytes(b"hi")
        websocket.send_text("hello")

        payment_id = client.post("/payments", json={"amount": 7, "currency": "USD"}).json()["id"]

        assert websocket.receive_json()["type"] == "paymentsUpdated"
        assert websocket.receive_json() == {
            "type": "paymentCreated",
            "data": {"id": payment_id, "amount": 7.0, "currency": "USD"},
        }
        assert app.state.container.hub.subscriber_count == 1
