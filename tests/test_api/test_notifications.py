from fastapi.testclient import TestClient

from ewaste_api.models.listing import Listing


def test_notifications_newest_first(client: TestClient, listing: Listing):
    """Each decision on a listing's requests adds one notification."""
    ids = []
    for name in ("Ana", "Ben"):
        response = client.post(
            "/api/request",
            json={
                "disposal_id": listing.id,
                "receiver_name": name,
                "receiver_contact": "555-0199",
                "receiver_email": f"{name.lower()}@example.com",
            },
        )
        ids.append(response.json()["data"]["id"])

    client.put(f"/api/request/{ids[0]}", json={"status": "Approved"})
    client.put(f"/api/request/{ids[1]}", json={"status": "Rejected"})

    response = client.get(f"/api/notifications/{listing.id}")

    assert response.status_code == 200
    data = response.json()
    assert [n["message"] for n in data] == [
        f"Your request for item ID {listing.id} has been Rejected.",
        f"Your request for item ID {listing.id} has been Approved.",
    ]
    assert data[0]["created_at"] >= data[1]["created_at"]


def test_notifications_empty_for_undecided_listing(client: TestClient, listing: Listing):
    response = client.get(f"/api/notifications/{listing.id}")

    assert response.status_code == 200
    assert response.json() == []
