"""Multipart body model: MIME-typed attachments and their ordered container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Union


@dataclass
class PduPart:
    """A single MIME-typed attachment inside an MMS body."""

    content_type: Optional[str] = None
    data: bytes = b""
    name: Optional[str] = None
    filename: Optional[str] = None
    charset: Optional[int] = None
    content_id: Optional[bytes] = None
    content_location: Optional[bytes] = None

    def __post_init__(self):
        self.set_content_type(self.content_type)

    def set_content_type(self, content_type: Union[str, bytes, None]) -> None:
        """Set the MIME type from text or from its raw header bytes."""
        if isinstance(content_type, (bytes, bytearray)):
            content_type = bytes(content_type).decode("latin-1")
        self.content_type = content_type

    @property
    def content_type_bytes(self) -> Optional[bytes]:
        if self.content_type is None:
            return None
        return self.content_type.encode("latin-1", errors="replace")

    def _primary_type(self) -> str:
        major, sep, _ = (self.content_type or "").partition("/")
        return major.strip().lower() if sep else ""

    def is_image(self) -> bool:
        return self._primary_type() == "image"

    def is_text(self) -> bool:
        return self._primary_type() == "text"

    def is_video(self) -> bool:
        return self._primary_type() == "video"

    def is_audio(self) -> bool:
        return self._primary_type() == "audio"


class PduBody:
    """Ordered, index-addressed collection of parts.

    Indices are always dense: removing a part shifts later parts down by one.
    Out-of-range access returns ``None`` rather than raising.
    """

    def __init__(self, parts: Optional[List[PduPart]] = None):
        self._parts: List[PduPart] = list(parts or [])

    def add_part(self, part: PduPart) -> None:
        self._parts.append(part)

    def get_part(self, index: int) -> Optional[PduPart]:
        """Return the part at ``index`` or None when it is outside ``[0, parts_num)``."""
        if 0 <= index < len(self._parts):
            return self._parts[index]
        return None

    def remove_part(self, index: int) -> Optional[PduPart]:
        """Detach and return the part at ``index``; None when out of range."""
        if 0 <= index < len(self._parts):
            return self._parts.pop(index)
        return None

    def get_part_by_content_id(self, content_id: Union[str, bytes]) -> Optional[PduPart]:
        if isinstance(content_id, str):
            content_id = content_id.encode("utf-8")
        for part in self._parts:
            if part.content_id == content_id:
                return part
        return None

    def get_part_by_name(self, name: str) -> Optional[PduPart]:
        for part in self._parts:
            if part.name == name:
                return part
        return None

    def clear(self) -> None:
        self._parts.clear()

    def is_empty(self) -> bool:
        return not self._parts

    @property
    def parts_num(self) -> int:
        return len(self._parts)

    @property
    def parts(self) -> List[PduPart]:
        """Snapshot of the parts in order; mutating it does not affect the body."""
        return list(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[PduPart]:
        return iter(list(self._parts))
