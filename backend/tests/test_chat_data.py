"""Tests for loading the static chat data."""

import json
import pytest

from chatroom.core.errors import ChatDataError
from chatroom.modules.chat.models import AttachmentType, ParticipantRole
from chatroom.services.chat_data import BUNDLED_DATA_FILE, load_chat_data


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def room_payload(room_id):
    return {
        "room": {
            "name": f"Room {room_id}",
            "id": room_id,
            "image_url": "https://example.com/r.png",
            "participant": [{"id": "a@mail.com", "name": "A", "role": 1}],
        },
        "comments": [],
    }


class TestBundledData:
    """The bundled dataset must load and respect the room invariants."""

    def test_bundled_file_exists(self):
        assert BUNDLED_DATA_FILE.exists()

    def test_loads_rooms_in_source_order(self):
        datasets = load_chat_data()
        assert [d.room.id for d in datasets] == [12456, 12457, 12458]

    def test_participants_read_from_singular_key(self):
        room = load_chat_data()[0].room
        assert [p.role for p in room.participants] == [
            ParticipantRole.VIEWER, ParticipantRole.AGENT, ParticipantRole.ADMIN,
        ]

    def test_attachments_parsed(self):
        comment = load_chat_data()[1].comments[1]
        attachment = comment.attachments[0]
        assert attachment.type == AttachmentType.PDF
        assert attachment.page_count == 12
        assert attachment.duration is None


class TestLoadErrors:
    """Unreadable or invalid data raises ChatDataError."""

    def test_custom_path(self, tmp_path):
        path = write_json(tmp_path / "data.json", {"results": [room_payload(7)]})
        assert [d.room.id for d in load_chat_data(path)] == [7]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ChatDataError):
            load_chat_data(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ChatDataError):
            load_chat_data(path)

    def test_schema_mismatch(self, tmp_path):
        path = write_json(tmp_path / "data.json", {"rooms": []})
        with pytest.raises(ChatDataError):
            load_chat_data(path)

    def test_unknown_attachment_type(self, tmp_path):
        payload = room_payload(1)
        payload["comments"].append({
            "id": 1, "type": "audio", "message": "", "sender": "a@mail.com",
            "timestamp": "2024-01-01T00:00:00.000Z",
            "attachments": [{
                "id": "x", "type": "audio", "filename": "a.mp3", "url": "u",
                "size": 1, "mime_type": "audio/mpeg",
            }],
        })
        path = write_json(tmp_path / "data.json", {"results": [payload]})
        with pytest.raises(ChatDataError):
            load_chat_data(path)

    def test_duplicate_room_ids(self, tmp_path):
        path = write_json(
            tmp_path / "data.json", {"results": [room_payload(1), room_payload(1)]}
        )
        with pytest.raises(ChatDataError, match="Duplicate room id 1"):
            load_chat_data(path)
