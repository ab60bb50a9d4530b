"""
Chat transcript logging.

Best effort: one JSON object per line (session_id, sender, message,
timestamp). A failing write is logged and dropped so the conversation goes on.
"""

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    return f"session_{uuid.uuid4().hex[:12]}"


class TranscriptLogger:
    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else None

    @property
    def enabled(self) -> bool:
        return self.path is not None

    def log(self, session_id: str, sender: str, message: str):
        if not self.enabled or not message:
            return

        record = {
            "session_id": session_id,
            "sender": sender,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(record, ensure_ascii=False) + "\n")
        except OSError as e:
            logger.warning("Failed to save message to %s: %s", self.path, e)

    def read_session(self, session_id: str):
        """All records of a session, oldest first"""
        if not self.enabled or not self.path.exists():
            return []
        records = []
        with self.path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                record = json.loads(line)
                if record.get("session_id") == session_id:
                    records.append(record)
        return records
