"""Uploaded file attachment shared by contracts, invoices and import templates."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FileUploadModel:
    file_name: Optional[str] = None
    file: Optional[bytes] = None
    link: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.file and not self.link
