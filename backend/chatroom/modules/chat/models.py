"""Data models for the Chat module."""
from enum import Enum, IntEnum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple


class ParticipantRole(IntEnum):
    VIEWER = 0
    AGENT = 1
    ADMIN = 2


class AttachmentType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    PDF = "pdf"
    FILE = "file"


class Participant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    role: ParticipantRole


class Room(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    id: int
    image_url: str
    # Source documents use the singular key
    participants: Tuple[Participant, ...] = Field(default=(), alias="participant")


class Attachment(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: AttachmentType
    filename: str
    url: str
    size: int  # bytes
    mime_type: str
    thumbnail_url: Optional[str] = None
    duration: Optional[float] = None  # seconds, video only
    page_count: Optional[int] = None  # pdf only


class Comment(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    type: str  # "text", "product" or an attachment type
    message: str
    sender: str
    timestamp: str  # ISO-8601
    attachments: Tuple[Attachment, ...] = ()


class ChatDataset(BaseModel):
    room: Room
    comments: List[Comment] = Field(default_factory=list)


class ChatDataFile(BaseModel):
    """Shape of the static initial data document."""
    results: List[ChatDataset]


class ProductMessage(BaseModel):
    name: str
    price: float
    image: str
