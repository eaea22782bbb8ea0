def _create_association(client, **overrides):
    payload = {
        "name": "Maligaya Cooperative",
        "location": "Barangay Maligaya",
        "active_members": 12,
        "inactive_members": 3,
    }
    payload.update(overrides)
    response = client.post("/associations", json=payload)
    assert response.status_code == 201, response.json()
    return response.json()


def test_create_and_get_association(client):
    created = _create_association(client)

    assert created["status"] == "active"
    assert created["total_members"] == 15
    assert created["archived"] is False
    fetched = client.get(f"/associations/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Maligaya Cooperative"


def test_list_supports_search_and_status(client):
    _create_association(client)
    _create_association(client, name="Riverside Growers", location="Riverside", status="pending")

    searched = client.get("/associations", params={"search": "river"}).json()
    assert [item["name"] for item in searched["items"]] == ["Riverside Growers"]

    pending = client.get("/associations", params={"status": "pending"}).json()
    assert pending["total"] == 1


def test_update_association(client):
    created = _create_association(client)

    response = client.patch(
        f"/associations/{created['_id']}",
        json={"active_members": 20, "name": "  Maligaya Farmers  "},
    )

    assert response.status_code == 200, response.json()
    assert response.json()["active_members"] == 20
    assert response.json()["name"] == "Maligaya Farmers"


def test_archive_and_restore_association(client):
    created = _create_association(client)

    archived = client.patch(f"/associations/{created['id']}/archive")
    assert archived.status_code == 200
    assert archived.json()["status"] == "archived"
    assert archived.json()["archived"] is True

    assert client.get("/associations").json()["total"] == 0
    assert client.get("/associations", params={"include_archived": True}).json()["total"] == 1
    assert client.get("/associations/archived").json()["total"] == 1

    restored = client.patch(f"/associations/{created['id']}/restore")
    assert restored.json()["status"] == "active"
    assert restored.json()["archived"] is False
    assert client.get("/associations").json()["total"] == 1


def test_association_stats(client):
    _create_association(client)
    second = _create_association(client, name="Hillside", active_members=5)
    client.patch(f"/associations/{second['id']}/archive")

    stats = client.get("/associations/stats").json()

    assert stats == {"totalAssociations": 1, "totalMembers": 12, "growthRate": 100}


def test_missing_association(client):
    assert client.get("/associations/assoc-missing").status_code == 404
    assert client.patch("/associations/assoc-missing/archive").status_code == 404


def test_create_validates_member_counts(client):
    response = client.post("/associations", json={"name": "Bad", "active_members": -1})

    assert response.status_code == 422


def test_update_rejects_null_and_archived_status(client):
    created = _create_association(client)

    assert client.patch(f"/associations/{created['id']}", json={"name": None}).status_code == 422
    assert client.patch(f"/associations/{created['id']}", json={"status": "archived"}).status_code == 422
    assert client.post("/associations", json={"name": "Other", "status": "archived"}).status_code == 422

    listed = client.get("/associations").json()
    assert listed["total"] == 1
    assert listed["items"][0]["status"] == "active"
