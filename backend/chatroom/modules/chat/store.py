"""In-memory chat room state container."""
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from chatroom.core import errors
from chatroom.modules.chat.models import (
    Attachment,
    ChatDataset,
    Comment,
    ProductMessage,
    Room,
)

logger = logging.getLogger(__name__)

DEFAULT_SENDER = "agent@mail.com"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ChatStore:
    """Holds the chat datasets, the selected room and the last error.

    Build one per process and hand it to consumers. Operations never raise;
    callers read ``error`` (and the return value of ``send_message``) to see
    whether the last call failed.
    """

    def __init__(
        self,
        datasets: List[ChatDataset],
        sender: str = DEFAULT_SENDER,
        clock: Callable[[], datetime] = _now,
    ):
        self._datasets = list(datasets)
        self._sender = sender
        self._clock = clock
        self._selected_room_id: Optional[int] = None
        self._error: Optional[str] = None
        self._lock = threading.RLock()
        self._last_comment_id = max(
            (c.id for d in self._datasets for c in d.comments), default=0
        )

    @property
    def selected_room_id(self) -> Optional[int]:
        return self._selected_room_id

    @property
    def error(self) -> Optional[str]:
        return self._error

    def _find_dataset(self, room_id: int) -> Optional[ChatDataset]:
        for dataset in self._datasets:
            if dataset.room.id == room_id:
                return dataset
        return None

    def rooms(self) -> List[Room]:
        with self._lock:
            return [dataset.room for dataset in self._datasets]

    def selected_room(self) -> Optional[Room]:
        with self._lock:
            if self._selected_room_id is None:
                return None
            dataset = self._find_dataset(self._selected_room_id)
            return dataset.room if dataset else None

    def current_messages(self) -> List[Comment]:
        with self._lock:
            if self._selected_room_id is None:
                return []
            return self.messages_by_room_id(self._selected_room_id)

    def messages_by_room_id(self, room_id: int) -> List[Comment]:
        """Comments for a room, oldest first. Does not change the selection."""
        with self._lock:
            dataset = self._find_dataset(room_id)
            return list(dataset.comments) if dataset else []

    def select_room(self, room_id: int) -> None:
        with self._lock:
            if self._find_dataset(room_id) is not None:
                self._selected_room_id = room_id
                self._error = None
                logger.debug("Selected room %d", room_id)
            else:
                self._error = errors.room_not_found(room_id)
                logger.info("Room %d not found", room_id)

    def snapshot(self) -> Tuple[Optional[Room], List[Comment], Optional[str]]:
        """Selected room, its messages and the last error, read together."""
        with self._lock:
            return self.selected_room(), self.current_messages(), self._error

    def open_room(
        self, room_id: int
    ) -> Tuple[Optional[Room], List[Comment], Optional[str]]:
        """Select a room and return the resulting snapshot in one step."""
        with self._lock:
            self.select_room(room_id)
            return self.snapshot()

    def _next_comment_id(self, now: datetime) -> int:
        # Millisecond clock, bumped past the last issued id so ids stay unique
        candidate = int(now.timestamp() * 1000)
        self._last_comment_id = max(candidate, self._last_comment_id + 1)
        return self._last_comment_id

    def send_message(
        self,
        text: str,
        product: Optional[ProductMessage] = None,
        attachments: Optional[List[Attachment]] = None,
    ) -> bool:
        """Append a new comment to the selected room.

        Returns True on success. On failure sets ``error`` and returns False.
        """
        comment, _ = self.post_message(text, product, attachments)
        return comment is not None

    def post_message(
        self,
        text: str,
        product: Optional[ProductMessage] = None,
        attachments: Optional[List[Attachment]] = None,
    ) -> Tuple[Optional[Comment], Optional[str]]:
        """Like send_message, but returns the appended comment and the error.

        The comment is None on failure. Both values are read under the same
        lock as the append.
        """
        with self._lock:
            if self._selected_room_id is None:
                self._error = errors.NO_ROOM_SELECTED
                return None, self._error

            try:
                attachments = list(attachments or [])
                trimmed = str(text or "").strip()
            except Exception:
                logger.exception("Invalid message input for room %d", self._selected_room_id)
                self._error = errors.SEND_FAILED
                return None, self._error

            if not trimmed and product is None and not attachments:
                self._error = errors.EMPTY_MESSAGE
                return None, self._error

            try:
                dataset = self._find_dataset(self._selected_room_id)
                if dataset is None:
                    raise LookupError(
                        f"no dataset for selected room {self._selected_room_id}"
                    )

                if product is not None:
                    kind = "product"
                    message = trimmed or product.name
                elif attachments:
                    kind = attachments[0].type.value
                    message = trimmed
                else:
                    kind = "text"
                    message = trimmed

                now = self._clock()
                comment = Comment(
                    id=self._next_comment_id(now),
                    type=kind,
                    message=message,
                    sender=self._sender,
                    timestamp=_iso(now),
                    attachments=attachments,
                )
                dataset.comments.append(comment)
            except Exception:
                logger.exception(
                    "Failed to send message to room %s", self._selected_room_id
                )
                self._error = errors.SEND_FAILED
                return None, self._error

            logger.info(
                "Comment %d (%s) added to room %d",
                comment.id, comment.type, self._selected_room_id,
            )
            self._error = None
            return comment, None


def _iso(moment: datetime) -> str:
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
