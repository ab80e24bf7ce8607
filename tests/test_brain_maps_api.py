"""Brain map routes, end to end over the ASGI app."""


async def _create_map(client, **payload) -> dict:
    response = await client.post("/brain-maps/", json=payload)
    assert response.status_code == 201
    return response.json()


async def _create_node(client, map_id: str, label: str, parent: str | None = None) -> dict:
    response = await client.post(
        "/brain-map-nodes/",
        json={"brain_map_id": map_id, "label": label, "parent_node_id": parent},
    )
    assert response.status_code == 201
    return response.json()


async def test_health(client):
    response = await client.get("/health")
    assert response.json() == {"status": "healthy"}


async def test_create_map_with_no_arguments(client):
    data = await _create_map(client)

    assert data["brain_map"]["title"] == "Untitled Map"
    assert data["connections"] == []
    assert len(data["nodes"]) == 1
    assert data["nodes"][0]["label"] == "Central Idea"
    assert data["nodes"][0]["layer"] == 0
    assert data["nodes"][0]["id"] == data["brain_map"]["center_node_id"]


async def test_get_unknown_map_returns_null(client):
    response = await client.get("/brain-maps/brainmap_missing")

    assert response.status_code == 200
    assert response.json() is None


async def test_map_round_trip(client):
    created = await _create_map(client, title="Research", description="Q3")
    map_id = created["brain_map"]["id"]
    a = await _create_node(client, map_id, "A")
    b = await _create_node(client, map_id, "B", parent=a["id"])
    connection = await client.post(
        "/brain-map-connections/",
        json={"brain_map_id": map_id, "source_node_id": a["id"], "target_node_id": b["id"]},
    )
    assert connection.status_code == 201
    assert connection.json()["style"] == "solid"
    assert connection.json()["animated"] is False

    data = (await client.get(f"/brain-maps/{map_id}")).json()

    assert data["brain_map"]["title"] == "Research"
    assert [n["layer"] for n in data["nodes"]] == [0, 1, 2]
    assert len(data["connections"]) == 1


async def test_update_and_list_maps(client):
    older = await _create_map(client, title="older")
    await _create_map(client, title="newer")

    response = await client.patch(
        f"/brain-maps/{older['brain_map']['id']}",
        json={"viewport_x": 40, "viewport_y": -8, "theme": "neon"},
    )
    assert response.status_code == 200
    assert response.json()["viewport_x"] == 40.0
    assert response.json()["theme"] == "neon"

    titles = [m["title"] for m in (await client.get("/brain-maps/")).json()]
    assert titles == ["older", "newer"]


async def test_update_unknown_map_is_404(client):
    response = await client.patch("/brain-maps/brainmap_missing", json={"title": "x"})

    assert response.status_code == 404
    assert "brainmap_missing" in response.json()["detail"]


async def test_invalid_theme_is_rejected(client):
    response = await client.post("/brain-maps/", json={"theme": "sepia"})
    assert response.status_code == 422


async def test_soft_and_hard_delete(client):
    created = await _create_map(client)
    map_id = created["brain_map"]["id"]

    response = await client.delete(f"/brain-maps/{map_id}")
    assert response.status_code == 204
    assert (await client.get("/brain-maps/")).json() == []
    assert (await client.get(f"/brain-maps/{map_id}")).json() is not None

    restored = await client.post(f"/brain-maps/{map_id}/restore")
    assert restored.status_code == 200
    assert restored.json()["deleted_at"] is None

    response = await client.delete(f"/brain-maps/{map_id}", params={"hard": True})
    assert response.status_code == 204
    assert (await client.get(f"/brain-maps/{map_id}")).json() is None


async def test_delete_parent_leaves_child_layer(client):
    created = await _create_map(client)
    map_id = created["brain_map"]["id"]
    a = await _create_node(client, map_id, "A")
    b = await _create_node(client, map_id, "B", parent=a["id"])

    response = await client.delete(f"/brain-map-nodes/{a['id']}")
    assert response.status_code == 204

    nodes = {n["id"]: n for n in (await client.get(f"/brain-maps/{map_id}")).json()["nodes"]}
    assert nodes[b["id"]]["parent_node_id"] is None
    assert nodes[b["id"]]["layer"] == 2

    # Deleting again is a no-op
    response = await client.delete(f"/brain-map-nodes/{a['id']}")
    assert response.status_code == 204


async def test_update_node(client):
    created = await _create_map(client)
    node = await _create_node(client, created["brain_map"]["id"], "draft")

    response = await client.patch(
        f"/brain-map-nodes/{node['id']}",
        json={"label": "final", "shape": "hexagon", "layer": 7},
    )

    assert response.status_code == 200
    assert response.json()["label"] == "final"
    assert response.json()["shape"] == "hexagon"
    assert response.json()["layer"] == 1


async def test_update_unknown_node_is_404(client):
    response = await client.patch("/brain-map-nodes/node_missing", json={"label": "x"})
    assert response.status_code == 404


async def test_reposition_reports_first_bad_reference(client):
    created = await _create_map(client)
    map_id = created["brain_map"]["id"]
    a = await _create_node(client, map_id, "a")
    b = await _create_node(client, map_id, "b")
    c = await _create_node(client, map_id, "c")

    response = await client.put(
        "/brain-map-nodes/positions",
        json=[[a["id"], 1, 1], [b["id"], 2, 2], ["node_missing", 0, 0], [c["id"], 3, 3]],
    )

    assert response.status_code == 404
    assert "node_missing" in response.json()["detail"]
    nodes = {n["id"]: n for n in (await client.get(f"/brain-maps/{map_id}")).json()["nodes"]}
    assert (nodes[a["id"]]["x"], nodes[a["id"]]["y"]) == (1.0, 1.0)
    assert (nodes[b["id"]]["x"], nodes[b["id"]]["y"]) == (2.0, 2.0)
    assert (nodes[c["id"]]["x"], nodes[c["id"]]["y"]) == (0.0, 0.0)


async def test_reposition_success(client):
    created = await _create_map(client)
    center_id = created["brain_map"]["center_node_id"]

    response = await client.put("/brain-map-nodes/positions", json=[[center_id, 50, 60]])
    assert response.status_code == 204


async def test_connection_to_unknown_node_is_conflict(client):
    created = await _create_map(client)
    map_id = created["brain_map"]["id"]

    response = await client.post(
        "/brain-map-connections/",
        json={
            "brain_map_id": map_id,
            "source_node_id": created["brain_map"]["center_node_id"],
            "target_node_id": "node_missing",
        },
    )

    assert response.status_code == 409


async def test_delete_connection(client):
    created = await _create_map(client)
    map_id = created["brain_map"]["id"]
    node = await _create_node(client, map_id, "n")
    connection = (
        await client.post(
            "/brain-map-connections/",
            json={
                "brain_map_id": map_id,
                "source_node_id": node["id"],
                "target_node_id": created["brain_map"]["center_node_id"],
                "style": "dotted",
            },
        )
    ).json()
    before = (await client.get(f"/brain-maps/{map_id}")).json()["brain_map"]["updated_at"]

    response = await client.delete(f"/brain-map-connections/{connection['id']}")

    assert response.status_code == 204
    after = (await client.get(f"/brain-maps/{map_id}")).json()
    assert after["connections"] == []
    assert after["brain_map"]["updated_at"] == before


async def test_recompute_layers_and_cycle_check(client):
    created = await _create_map(client)
    map_id = created["brain_map"]["id"]
    center_id = created["brain_map"]["center_node_id"]
    a = await _create_node(client, map_id, "a")
    b = await _create_node(client, map_id, "b", parent=a["id"])

    check = await client.get(
        f"/brain-map-nodes/{a['id']}/cycle-check", params={"parent_node_id": b["id"]}
    )
    assert check.status_code == 200
    assert check.json()["would_create_cycle"] is True

    await client.patch(f"/brain-map-nodes/{b['id']}", json={"parent_node_id": center_id})
    response = await client.post(f"/brain-maps/{map_id}/recompute-layers")

    assert response.status_code == 200
    layers = {n["id"]: n["layer"] for n in response.json()}
    assert layers[b["id"]] == 1
