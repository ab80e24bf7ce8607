"""Event routes."""


async def _create_event(client, **payload) -> dict:
    response = await client.post("/events/", json=payload)
    assert response.status_code == 201
    return response.json()


async def test_create_event_defaults(client):
    event = await _create_event(client, title="Standup")

    assert event["id"].startswith("event_")
    assert event["time_mode"] == "at_time"
    assert event["category"] == "personal"
    assert event["priority"] == "medium"
    assert event["status"] == "pending"
    assert event["show_on_calendar"] is True
    assert event["is_all_day"] is False
    assert event["is_recurring"] is False
    assert event["has_scheduled_time"] is False
    assert event["reminders"] == []


async def test_reminders_and_tags_round_trip(client):
    reminders = [
        {"id": "r1", "minutes_before": 30, "type": "notification"},
        {"id": "r2", "minutes_before": 1440, "type": "email"},
    ]
    event = await _create_event(
        client,
        title="Dentist",
        start_time="2026-11-02T09:00:00+00:00",
        tags=["health", "errand"],
        reminders=reminders,
        is_recurring=True,
        recurring_pattern="yearly",
    )

    fetched = (await client.get(f"/events/{event['id']}")).json()

    assert fetched["reminders"] == reminders
    assert fetched["tags"] == ["health", "errand"]
    assert fetched["has_scheduled_time"] is True
    assert fetched["recurring_pattern"] == "yearly"


async def test_list_events_by_start_and_range(client):
    await _create_event(client, title="later", start_time="2026-11-20T10:00:00+00:00")
    await _create_event(client, title="unscheduled")
    await _create_event(client, title="sooner", start_time="2026-11-01T10:00:00+00:00")

    titles = [e["title"] for e in (await client.get("/events/")).json()]
    assert titles == ["sooner", "later", "unscheduled"]

    in_range = (
        await client.get(
            "/events/",
            params={"start": "2026-11-10T00:00:00+00:00", "end": "2026-11-30T00:00:00+00:00"},
        )
    ).json()
    assert [e["title"] for e in in_range] == ["later"]


async def test_update_event(client):
    event = await _create_event(client, title="Draft")

    response = await client.patch(
        f"/events/{event['id']}",
        json={"status": "completed", "start_time": "2026-12-01T08:00:00+00:00", "priority": None},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "completed"
    assert data["has_scheduled_time"] is True
    assert data["priority"] == "medium"
    assert data["title"] == "Draft"


async def test_update_event_type(client):
    event = await _create_event(client, title="Sync", event_type="meeting")

    response = await client.patch(f"/events/{event['id']}", json={"event_type": "call"})

    assert response.status_code == 200
    assert response.json()["event_type"] == "call"


async def test_update_unknown_event_is_404(client):
    response = await client.patch("/events/event_missing", json={"title": "x"})
    assert response.status_code == 404


async def test_soft_delete_event(client):
    event = await _create_event(client, title="Cancelled")

    await client.delete(f"/events/{event['id']}")

    assert (await client.get("/events/")).json() == []
    assert (await client.get(f"/events/{event['id']}")).json()["deleted_at"] is not None

    await client.delete(f"/events/{event['id']}", params={"hard": True})
    assert (await client.get(f"/events/{event['id']}")).json() is None


async def test_invalid_status_is_rejected(client):
    event = await _create_event(client, title="x")
    response = await client.patch(f"/events/{event['id']}", json={"status": "someday"})
    assert response.status_code == 422
