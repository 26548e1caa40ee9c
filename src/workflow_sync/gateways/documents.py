"""Document gateways: form-documents and uploaded files."""

from collections.abc import Callable, Sequence
from typing import Any

from src.workflow_sync.core.logging import get_logger
from src.workflow_sync.gateways.base import BaseGateway, GatewayError
from src.workflow_sync.models import EntityType, ModuleType, upload_category_for
from src.workflow_sync.schemas.documents import (
    FormDocument,
    FormDocumentCreate,
    FormDocumentUpdate,
    UploadedFile,
    UploadProgress,
)

logger = get_logger(__name__)

# (file name, content, content type)
FileUpload = tuple[str, bytes, str]


def _as_list(data: Any) -> list[Any]:
    if data is None:
        return []
    if isinstance(data, list):
        return data
    raise GatewayError(f"Expected a list, got {type(data).__name__}")


class FormDocumentGateway(BaseGateway):
    """CRUD over form-documents attached to business records."""

    base_path = "/api/EntityFormDocuments"

    async def get_by_entity(self, entity_type: EntityType, entity_id: int) -> list[FormDocument]:
        """List form-documents owned by a record, excluding soft-deleted ones."""
        data = await self._request(
            "GET",
            f"{self.base_path}/entity/{entity_type.value}/{entity_id}",
            allow_not_found=True,
        )
        documents = [FormDocument.model_validate(item) for item in _as_list(data)]
        return [doc for doc in documents if not doc.is_deleted]

    async def create(self, payload: FormDocumentCreate) -> FormDocument:
        data = await self._request("POST", self.base_path, json=payload.model_dump(mode="json"))
        return FormDocument.model_validate(data)

    async def update(self, payload: FormDocumentUpdate) -> FormDocument:
        data = await self._request(
            "PUT",
            f"{self.base_path}/{payload.id}",
            json=payload.model_dump(mode="json", exclude_none=True),
        )
        return FormDocument.model_validate(data)

    async def delete(self, document_id: int) -> None:
        """Soft delete a form-document."""
        await self._request("DELETE", f"{self.base_path}/{document_id}")

    async def copy(
        self,
        source_type: EntityType,
        source_id: int,
        target_type: EntityType,
        target_id: int,
    ) -> int:
        """Copy every form-document of the source to the target.

        Returns:
            Number of form-documents copied
        """
        data = await self._request(
            "POST",
            f"{self.base_path}/copy",
            json={
                "sourceEntityType": source_type.value,
                "sourceEntityId": source_id,
                "targetEntityType": target_type.value,
                "targetEntityId": target_id,
            },
        )
        if not isinstance(data, dict):
            raise GatewayError(
                "Copy response is missing copiedCount", path=f"{self.base_path}/copy"
            )
        return int(data.get("copiedCount", 0))


class FileGateway(BaseGateway):
    """Uploaded-file listing, upload and deletion."""

    base_path = "/api/Documents"

    async def list_files(
        self, module_type: ModuleType, module_id: str | None = None
    ) -> list[UploadedFile]:
        """List uploaded files of a module.

        The listing endpoint filters by module type only, so the module id
        filter is applied here.
        """
        data = await self._request("GET", self.base_path, params={"moduleType": module_type.value})
        files = [UploadedFile.model_validate(item) for item in _as_list(data)]
        if module_id is None:
            return files
        return [f for f in files if f.module_id == module_id]

    async def upload(
        self,
        files: Sequence[FileUpload],
        module_type: ModuleType,
        module_id: str,
        module_name: str | None = None,
        on_progress: Callable[[UploadProgress], None] | None = None,
    ) -> list[UploadedFile]:
        """Upload files to a module, one request per file.

        Args:
            files: (name, content, content type) tuples
            module_type: Target module
            module_id: Target record id in the module's addressing
            module_name: Display name stored with the files
            on_progress: Called after each file with the running count

        Returns:
            The uploaded files as stored by the document service
        """
        category = upload_category_for(module_type)
        form = {
            "moduleType": module_type.value,
            "moduleId": module_id,
            "moduleName": module_name or f"{module_type.value}-{module_id}",
            "category": category.value,
        }
        uploaded: list[UploadedFile] = []
        for index, (name, content, content_type) in enumerate(files, start=1):
            data = await self._request(
                "POST",
                f"{self.base_path}/upload",
                data=form,
                files={"files": (name, content, content_type)},
            )
            items = [data] if isinstance(data, dict) else _as_list(data)
            uploaded.extend(UploadedFile.model_validate(item) for item in items)
            if on_progress is not None:
                on_progress(
                    UploadProgress(
                        uploaded_files=index,
                        total_files=len(files),
                        module_type=module_type,
                    )
                )
        logger.info(
            "Files uploaded",
            module_type=module_type.value,
            module_id=module_id,
            count=len(uploaded),
        )
        return uploaded

    async def delete(self, file_id: str) -> None:
        await self._request("DELETE", f"{self.base_path}/{file_id}")
