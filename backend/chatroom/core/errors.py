"""Error messages surfaced through ChatStore.error."""

NO_ROOM_SELECTED = "No room selected"
EMPTY_MESSAGE = "Message cannot be empty"
SEND_FAILED = "Failed to send message"


def room_not_found(room_id: int) -> str:
    return f"Room with ID {room_id} not found"


class ChatDataError(Exception):
    """Raised when the initial chat data cannot be loaded."""
