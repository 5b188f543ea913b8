from darkflix.extensions import socketio


def test_posted_messages_are_pushed_to_joined_clients(app, client):
    code = client.get("/create-room", query_string={"username": "alice"}).get_json()["roomCode"]
    other = client.get("/create-room", query_string={"username": "bob"}).get_json()["roomCode"]

    listener = socketio.test_client(app, flask_test_client=client)
    bystander = socketio.test_client(app, flask_test_client=client)
    listener.emit("join", {"room": code})
    bystander.emit("join", {"room": other})

    client.post(f"/send-message/{code}", json={"username": "alice", "message": "hi"})

    received = listener.get_received()
    assert [e["name"] for e in received] == ["message"]
    assert received[0]["args"]["message"] == "hi"
    assert bystander.get_received() == []


def test_leave_stops_push(app, client):
    code = client.get("/create-room", query_string={"username": "alice"}).get_json()["roomCode"]
    listener = socketio.test_client(app, flask_test_client=client)
    listener.emit("join", {"room": code})
    listener.emit("leave", {"room": code})

    client.post(f"/send-message/{code}", json={"username": "alice", "message": "hi"})

    assert listener.get_received() == []
