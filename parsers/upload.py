"""Admission gate for resume uploads. Runs before any network call."""
from dataclasses import dataclass
from typing import Optional

from config import ALLOWED_UPLOAD_TYPES, MAX_UPLOAD_BYTES, MAX_UPLOAD_MB
from errors import ValidationError


@dataclass(frozen=True)
class StagedFile:
    name: str
    media_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


def validate_upload(name: Optional[str], media_type: Optional[str], size: int) -> None:
    if media_type not in ALLOWED_UPLOAD_TYPES:
        raise ValidationError("Please upload a PDF or DOCX file", status_code=415)
    if size > MAX_UPLOAD_BYTES:
        raise ValidationError(f"File size must be less than {MAX_UPLOAD_MB}MB", status_code=413)
    if size == 0:
        raise ValidationError(f"{name or 'The file'} is empty")


def admit(staged: StagedFile) -> StagedFile:
    validate_upload(staged.name, staged.media_type, staged.size)
    return staged
