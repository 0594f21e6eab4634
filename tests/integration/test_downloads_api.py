"""Integration tests for digital asset issuing and redemption."""

import pytest


@pytest.mark.asyncio
async def test_issue_then_redeem(client, storage):
    response = await client.post(
        "/api/v1/digital-assets",
        json={
            "order_id": "order-1",
            "platform_product_id": "777",
            "asset_type": "archive",
            "file_url": "archives/order-1/memories.zip",
        },
    )
    assert response.status_code == 201, response.text
    token = response.json()["download_token"]

    response = await client.get("/api/v1/downloads", params={"token": token})

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["asset_type"] == "archive"
    assert data["download_url"].endswith("archives/order-1/memories.zip?token=signed&expires=600")
    assert storage.signed == [("archives", "order-1/memories.zip", 600)]


@pytest.mark.asyncio
async def test_issue_rejects_bad_file_url(client):
    response = await client.post(
        "/api/v1/digital-assets",
        json={
            "order_id": "order-1",
            "platform_product_id": "777",
            "asset_type": "tribute",
            "file_url": "no-bucket",
        },
    )

    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"token": "unknown"}, {}])
async def test_invalid_token_is_not_found(client, params):
    response = await client.get("/api/v1/downloads", params=params)

    assert response.status_code == 404
    assert response.json()["detail"] == "Invalid or expired download link"
