from conftest import bearer, signup_and_login


def test_topic_request_review_flow(client):
    user = signup_and_login(client, "learner@example.com")
    other = signup_and_login(client, "other@example.com")
    admin = signup_and_login(client, "reviewer@techcurators.in")

    res = client.post(
        "/api/topic-requests",
        json={"topic": "Machine Learning", "description": "AI and ML fundamentals"},
        headers=bearer(user["token"]),
    )
    assert res.status_code == 201, res.text
    created = res.json()
    assert created["status"] == "pending"
    assert created["requested_by"] == user["user"]["id"]

    client.post(
        "/api/topic-requests", json={"topic": "Rust"}, headers=bearer(other["token"])
    )

    # Users only see their own requests
    mine = client.get("/api/topic-requests", headers=bearer(user["token"])).json()
    assert [r["topic"] for r in mine] == ["Machine Learning"]

    # Admins see all of them
    everything = client.get("/api/topic-requests", headers=bearer(admin["token"])).json()
    assert {r["topic"] for r in everything} == {"Machine Learning", "Rust"}

    res = client.patch(
        f"/api/topic-requests/{created['id']}",
        json={"status": "approved"},
        headers=bearer(user["token"]),
    )
    assert res.status_code == 403

    res = client.patch(
        f"/api/topic-requests/{created['id']}",
        json={"status": "approved"},
        headers=bearer(admin["token"]),
    )
    assert res.status_code == 200, res.text
    assert res.json()["status"] == "approved"
    assert res.json()["updated_at"]

    mine = client.get("/api/topic-requests", headers=bearer(user["token"])).json()
    assert mine[0]["status"] == "approved"


def test_topic_request_errors(client):
    user = signup_and_login(client, "learner@example.com")
    admin = signup_and_login(client, "reviewer@techcurators.in")

    res = client.post("/api/topic-requests", json={"topic": "   "}, headers=bearer(user["token"]))
    assert res.status_code == 400
    assert res.json() == {"message": "Topic is required"}

    res = client.patch(
        "/api/topic-requests/does-not-exist",
        json={"status": "rejected"},
        headers=bearer(admin["token"]),
    )
    assert res.status_code == 404

    res = client.patch(
        "/api/topic-requests/does-not-exist",
        json={"status": "archived"},
        headers=bearer(admin["token"]),
    )
    assert res.status_code == 422

    assert client.get("/api/topic-requests").status_code == 401
