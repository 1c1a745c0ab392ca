"""Customer attachments through pre-signed object-storage uploads.

Attaching a file to an existing customer is three sequential steps, each
awaited before the next starts:

1. Request an upload slot: POST /api/file/upload → ``{fileKey, uploadUrl}``
2. PUT the raw bytes to ``uploadUrl`` (no bearer token, no retry)
3. Register the file with a partial update of the customer record
   (``newAttachmentFileList``)

A failure at any step aborts the flow. Nothing is rolled back: when step 3
fails the object already written in step 2 stays in storage unreferenced,
which is logged as ``attachment_orphaned``.

Cardinality is checked locally before step 1, so a refused attachment
never reaches the network.
"""

import mimetypes
from collections import Counter
from typing import Iterable, Sequence

import structlog

from customer_admin.core.endpoints import CustomerEndpoints, FileEndpoints
from customer_admin.core.exceptions import (
    AttachmentLimitError,
    InvalidAttachmentError,
    UploadError,
)
from customer_admin.core.formatting import file_extension, format_file_size
from customer_admin.core.messages import FILE_CATEGORY_LABELS
from customer_admin.schemas.customer import Customer, CustomerUpdateRequest
from customer_admin.schemas.files import (
    AttachmentFile,
    FileCategory,
    FileViewUrl,
    LocalFile,
    UploadSlot,
    UploadSlotRequest,
)
from customer_admin.services.api_client import ApiClient, parse_response, unwrap_data

logger = structlog.get_logger(__name__)

ALLOWED_EXTENSIONS = frozenset({"pdf", "jpg", "jpeg", "png", "doc", "docx", "xls", "xlsx"})
DEFAULT_MAX_SIZE_BYTES = 10 * 1024 * 1024


class AttachmentService:
    """Uploads, registers and removes customer attachments."""

    def __init__(self, api: ApiClient, max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES) -> None:
        self._api = api
        self._max_size_bytes = max_size_bytes

    # ------------------------------------------------------------------
    # Local checks (no network)
    # ------------------------------------------------------------------

    @staticmethod
    def ensure_capacity(
        category: FileCategory,
        existing_files: Iterable[AttachmentFile],
        adding: int = 1,
    ) -> None:
        """Refuse an attachment that would exceed the category's file limit."""
        count = sum(1 for f in existing_files if f.category == category)
        if count + adding <= category.max_files:
            return

        label = FILE_CATEGORY_LABELS.get(category.value, category.value)
        if category.is_multi_valued:
            message = f"{label}은(는) 최대 {category.max_files}개까지 첨부할 수 있습니다."
        else:
            message = f"{label}은(는) 1개만 첨부할 수 있습니다. 기존 파일을 먼저 삭제해주세요."
        logger.info("attachment_limit_reached", category=category.value, existing=count)
        raise AttachmentLimitError(message)

    def validate_local_file(self, local_file: LocalFile) -> str:
        """Check extension and size; return the lowercased extension."""
        extension = file_extension(local_file.name)
        if extension not in ALLOWED_EXTENSIONS:
            raise InvalidAttachmentError(
                "PDF, 이미지(JPG, PNG), 문서(DOC, DOCX, XLS, XLSX) 파일만 업로드할 수 있습니다."
            )
        if local_file.size > self._max_size_bytes:
            raise InvalidAttachmentError(
                f"파일 크기는 {format_file_size(self._max_size_bytes)} 이하여야 합니다."
            )
        if local_file.size == 0:
            raise InvalidAttachmentError("빈 파일은 업로드할 수 없습니다.")
        return extension

    # ------------------------------------------------------------------
    # Steps 1 and 2
    # ------------------------------------------------------------------

    async def request_upload_slots(
        self, requests: Sequence[UploadSlotRequest]
    ) -> list[UploadSlot]:
        """Ask the backend for one pre-signed URL per requested file."""
        body = await self._api.post(
            FileEndpoints.UPLOAD,
            {"fileList": [r.to_payload() for r in requests]},
        )
        data = unwrap_data(body) or {}
        raw_slots = data.get("uploadUrlResList") if isinstance(data, dict) else None
        if not raw_slots or len(raw_slots) != len(requests):
            logger.error(
                "upload_slots_mismatch",
                requested=len(requests),
                received=len(raw_slots or []),
            )
            raise UploadError("업로드 URL을 발급받지 못했습니다.")
        return [parse_response(UploadSlot, slot) for slot in raw_slots]

    async def upload(
        self,
        local_file: LocalFile,
        category: FileCategory,
        slot: UploadSlot,
        extension: str,
    ) -> AttachmentFile:
        """Write the file to storage and describe it for registration."""
        content_type = _content_type(local_file)
        await self._api.put_object(slot.upload_url, local_file.content, content_type)
        logger.info(
            "attachment_uploaded",
            file_key=slot.file_key,
            category=category.value,
            size=local_file.size,
        )
        return AttachmentFile(
            file_key=slot.file_key,
            category=category,
            original_file_name=local_file.name,
            extension=extension,
            content_type=content_type,
            size=local_file.size,
        )

    async def stage(
        self,
        files: Sequence[tuple[FileCategory, LocalFile]],
    ) -> list[AttachmentFile]:
        """Upload files picked on the create form; registration happens with the create call.

        All checks run before any request. Slots are requested in one batch,
        then files are uploaded one after another.
        """
        if not files:
            return []

        counts = Counter(category for category, _ in files)
        for category, count in counts.items():
            self.ensure_capacity(category, (), adding=count)

        extensions = [self.validate_local_file(local_file) for _, local_file in files]
        slots = await self.request_upload_slots(
            [
                UploadSlotRequest(
                    category=category,
                    extension=extension,
                    content_type=_content_type(local_file),
                )
                for (category, local_file), extension in zip(files, extensions)
            ]
        )

        staged: list[AttachmentFile] = []
        for (category, local_file), extension, slot in zip(files, extensions, slots):
            staged.append(await self.upload(local_file, category, slot, extension))
        return staged

    # ------------------------------------------------------------------
    # Full flow against an existing customer
    # ------------------------------------------------------------------

    async def attach(
        self,
        customer: Customer,
        local_file: LocalFile,
        category: FileCategory,
    ) -> AttachmentFile:
        """Run the three-step flow for one file.

        Raises:
            AttachmentLimitError: The category is full (no request is made).
            InvalidAttachmentError: Unsupported extension or size.
            ApiError / NetworkError / UploadError: A step failed.
        """
        self.ensure_capacity(category, customer.customer_file_list)
        extension = self.validate_local_file(local_file)

        slot_request = UploadSlotRequest(
            category=category,
            extension=extension,
            content_type=_content_type(local_file),
        )
        (slot,) = await self.request_upload_slots([slot_request])
        attachment = await self.upload(local_file, category, slot, extension)

        request = CustomerUpdateRequest.from_customer(
            customer,
            new_attachment_file_list=[attachment],
        )
        try:
            await self._api.patch(
                CustomerEndpoints.detail(customer.customer_id),
                request.to_payload(),
            )
        except Exception:
            logger.warning(
                "attachment_orphaned",
                customer_id=customer.customer_id,
                file_key=attachment.file_key,
            )
            raise

        logger.info(
            "attachment_registered",
            customer_id=customer.customer_id,
            file_key=attachment.file_key,
        )
        return attachment

    async def detach(self, customer: Customer, file_id: int) -> None:
        """Remove an attachment from the record. Storage cleanup is left to the backend."""
        request = CustomerUpdateRequest.from_customer(
            customer,
            delete_attachment_file_list=[file_id],
        )
        await self._api.patch(
            CustomerEndpoints.detail(customer.customer_id),
            request.to_payload(),
        )
        logger.info("attachment_removed", customer_id=customer.customer_id, file_id=file_id)

    async def view_url(self, file_id: int, file_key: str) -> FileViewUrl:
        """Short-lived URL for viewing or downloading a stored file."""
        body = await self._api.post(
            FileEndpoints.GENERATE_VIEW_URL,
            {"fileId": file_id, "fileKey": file_key},
        )
        return parse_response(FileViewUrl, unwrap_data(body))


def _content_type(local_file: LocalFile) -> str:
    if local_file.content_type:
        return local_file.content_type
    guessed, _ = mimetypes.guess_type(local_file.name)
    return guessed or "application/octet-stream"
