import pytest


@pytest.mark.asyncio
async def test_conversation_round_trip(app_client):
    res = await app_client.post("/chat/conversations")
    assert res.status_code == 201
    conv = res.json()
    assert conv["state"] == "idle"
    assert [m["sender"] for m in conv["messages"]] == ["bot"]
    assert conv["messages"][0]["text"] == "Ask me anything about farming!"

    res = await app_client.post(
        f"/chat/conversations/{conv['id']}/messages", json={"text": "Need a harvester"}
    )
    assert res.status_code == 200
    exchange = res.json()
    assert exchange["sent"]["text"] == "Need a harvester"
    assert exchange["reply"]["text"].startswith("Our harvest equipment")

    transcript = (await app_client.get(f"/chat/conversations/{conv['id']}")).json()
    assert [m["sender"] for m in transcript["messages"]] == ["bot", "user", "bot"]


@pytest.mark.asyncio
async def test_blank_message_and_unknown_conversation(app_client):
    conv = (await app_client.post("/chat/conversations")).json()
    res = await app_client.post(f"/chat/conversations/{conv['id']}/messages", json={"text": "  "})
    assert res.status_code == 400

    res = await app_client.get("/chat/conversations/does-not-exist")
    assert res.status_code == 404
    assert res.json() == {"detail": "conversation not found"}
