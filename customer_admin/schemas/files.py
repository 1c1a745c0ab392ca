"""Customer attachment schemas."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from customer_admin.schemas.base import CamelModel


class FileCategory(str, Enum):
    BUSINESS_LICENSE = "BUSINESS_LICENSE"
    ELECTRICAL_DIAGRAM = "ELECTRICAL_DIAGRAM"
    POWER_USAGE_DATA = "POWER_USAGE_DATA"
    FEASIBILITY_REPORT = "FEASIBILITY_REPORT"
    OTHER = "OTHER"

    @property
    def is_multi_valued(self) -> bool:
        return self in MULTI_VALUED_CATEGORIES

    @property
    def max_files(self) -> int:
        return MULTI_VALUED_MAX_FILES if self.is_multi_valued else 1


MULTI_VALUED_CATEGORIES = frozenset({FileCategory.ELECTRICAL_DIAGRAM, FileCategory.OTHER})
MULTI_VALUED_MAX_FILES = 5


class AttachmentFile(CamelModel):
    """A file uploaded to object storage, registered on a customer record."""

    file_key: str
    category: FileCategory
    original_file_name: str
    extension: str
    content_type: str
    size: int


class CustomerFile(AttachmentFile):
    """An attachment as persisted by the backend."""

    file_id: int
    created_at: datetime | None = None


class UploadSlotRequest(CamelModel):
    category: FileCategory
    extension: str
    content_type: str


class UploadSlot(CamelModel):
    """A pre-signed upload URL and the storage key it writes to."""

    file_key: str
    upload_url: str


class FileViewUrl(CamelModel):
    file_view_url: str
    file_name: str
    file_size: int
    content_type: str


@dataclass(frozen=True)
class LocalFile:
    """A file picked by the user, ready to be uploaded."""

    name: str
    content: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)
