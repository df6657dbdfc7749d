"""
Flat-file content store.

The whole site lives in one JSON document. Reads load the full document and
writes replace one section wholesale; there is no partial update.
"""

import json
import os
import tempfile
import threading
import logging
from typing import Any, Dict, List

from pydantic import TypeAdapter

from app.modules.content_file.schemas import (
    ContentDocument, HeroContent, ServiceContent, TeamMemberContent, GalleryItemContent,
)

logger = logging.getLogger(__name__)

SECTION_TYPES: Dict[str, TypeAdapter] = {
    "hero": TypeAdapter(HeroContent),
    "services": TypeAdapter(List[ServiceContent]),
    "team": TypeAdapter(List[TeamMemberContent]),
    "clients": TypeAdapter(List[str]),
    "gallery": TypeAdapter(List[GalleryItemContent]),
}

_write_lock = threading.Lock()


class ContentFileError(Exception):
    pass


class ContentFileStore:
    def __init__(self, path: str):
        self.path = path

    def read(self) -> ContentDocument:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return ContentDocument.model_validate(json.load(f))
        except Exception as e:
            logger.error(f"Error reading content file {self.path}: {e}")
            raise ContentFileError("Failed to load content") from e

    def write(self, document: ContentDocument) -> None:
        """Write to a sibling temp file then atomically replace the original."""
        directory = os.path.dirname(os.path.abspath(self.path))
        payload = document.model_dump(mode="json", by_alias=True)
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, suffix=".tmp", delete=False
            ) as tmp:
                tmp_path = tmp.name
                json.dump(payload, tmp, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except Exception as e:
            logger.error(f"Error saving content file {self.path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise ContentFileError("Failed to save content") from e

    def get_section(self, name: str) -> Any:
        return getattr(self.read(), name)

    def replace_section(self, name: str, value: Any) -> None:
        with _write_lock:
            document = self.read()
            setattr(document, name, value)
            self.write(document)
