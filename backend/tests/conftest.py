import pytest
from datetime import datetime, timezone

from chatroom.modules.chat.models import ChatDataset
from chatroom.modules.chat.store import ChatStore


def make_dataset(room_id: int, name: str, comment_ids=()):
    return ChatDataset.model_validate({
        "room": {
            "name": name,
            "id": room_id,
            "image_url": f"https://example.com/{room_id}.png",
            "participant": [
                {"id": "agent@mail.com", "name": "Agent", "role": 1},
                {"id": "customer@mail.com", "name": "Customer", "role": 2},
            ],
        },
        "comments": [
            {
                "id": cid,
                "type": "text",
                "message": f"message {cid}",
                "sender": "customer@mail.com",
                "timestamp": "2024-01-10T19:02:11.000Z",
                "attachments": [],
            }
            for cid in comment_ids
        ],
    })


FIXED_NOW = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


@pytest.fixture
def datasets():
    return [
        make_dataset(1, "Room One", [10, 11]),
        make_dataset(2, "Room Two", [20]),
        make_dataset(3, "Room Three"),
    ]


@pytest.fixture
def store(datasets):
    return ChatStore(datasets, clock=lambda: FIXED_NOW)
