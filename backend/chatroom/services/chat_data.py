from pathlib import Path
from typing import List, Optional
import json
import logging

from pydantic import ValidationError

from chatroom.core.errors import ChatDataError
from chatroom.modules.chat.models import ChatDataFile, ChatDataset

logger = logging.getLogger(__name__)

BUNDLED_DATA_FILE = Path(__file__).parent.parent / "data" / "chat_data.json"


def load_chat_data(path: Optional[Path] = None) -> List[ChatDataset]:
    """Load the static chat datasets. path=None reads the bundled file."""
    path = Path(path) if path else BUNDLED_DATA_FILE
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        raise ChatDataError(f"Cannot read chat data from {path}: {e}") from e

    try:
        data = ChatDataFile.model_validate(raw)
    except ValidationError as e:
        raise ChatDataError(f"Invalid chat data in {path}: {e}") from e

    seen = set()
    for dataset in data.results:
        if dataset.room.id in seen:
            raise ChatDataError(f"Duplicate room id {dataset.room.id} in {path}")
        seen.add(dataset.room.id)

    logger.info("Loaded %d chat rooms from %s", len(data.results), path)
    return data.results
