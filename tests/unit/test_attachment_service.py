"""Tests for uploads and owner-scoped deletions."""

import pytest

from src.workflow_sync.gateways import GatewayError
from src.workflow_sync.models import EntityRef, EntityType, ModuleType
from src.workflow_sync.services import AttachmentService
from tests.factories import FormDocumentFactory, UploadedFileFactory

pytestmark = pytest.mark.unit

SO_5 = EntityRef(EntityType.SERVICE_ORDER, 5)
DISPATCH_9 = EntityRef(EntityType.DISPATCH, 9)


@pytest.fixture
def service(form_document_gateway, file_gateway) -> AttachmentService:
    return AttachmentService(form_document_gateway, file_gateway)


class TestUpload:
    async def test_uses_owner_module_addressing(self, service, file_gateway):
        uploaded = [UploadedFileFactory.build()]
        file_gateway.upload.return_value = uploaded
        files = [("report.pdf", b"%PDF-1.4", "application/pdf")]

        result = await service.upload(SO_5, files)

        assert result == uploaded
        file_gateway.upload.assert_awaited_once_with(
            files, ModuleType.SERVICES, "5", module_name=None, on_progress=None
        )

    async def test_installation_cannot_receive_files(self, service, file_gateway):
        with pytest.raises(ValueError, match="installation"):
            await service.upload(EntityRef(EntityType.INSTALLATION, 1), [])
        file_gateway.upload.assert_not_called()


class TestBulkDelete:
    @pytest.fixture
    def attachments(self, form_document_gateway, file_gateway):
        own_doc = FormDocumentFactory.for_owner(SO_5)
        related_doc = FormDocumentFactory.for_owner(DISPATCH_9)
        own_files = [UploadedFileFactory.build(), UploadedFileFactory.build()]
        related_file = UploadedFileFactory.build(module_type="field", module_id="9")

        async def _docs(entity_type, entity_id):
            return [own_doc] if entity_type == EntityType.SERVICE_ORDER else [related_doc]

        async def _files(module_type, module_id):
            return own_files if module_type == ModuleType.SERVICES else [related_file]

        form_document_gateway.get_by_entity.side_effect = _docs
        file_gateway.list_files.side_effect = _files
        return own_doc, related_doc, own_files, related_file

    async def test_only_owned_items_are_deleted(
        self, service, attachments, form_document_gateway, file_gateway
    ):
        own_doc, related_doc, own_files, related_file = attachments

        result = await service.bulk_delete(
            SO_5,
            form_document_ids=[own_doc.id, related_doc.id],
            file_ids=[own_files[0].id, related_file.id],
        )

        assert result.deleted_form_documents == [own_doc.id]
        assert result.deleted_files == [own_files[0].id]
        assert sorted(result.ignored) == sorted([str(related_doc.id), related_file.id])
        form_document_gateway.delete.assert_awaited_once_with(own_doc.id)
        file_gateway.delete.assert_awaited_once_with(own_files[0].id)

    async def test_failed_file_delete_continues(self, service, attachments, file_gateway):
        _, _, own_files, _ = attachments

        async def _delete(file_id):
            if file_id == own_files[0].id:
                raise GatewayError("locked", status_code=409)

        file_gateway.delete.side_effect = _delete

        result = await service.bulk_delete(SO_5, file_ids=[f.id for f in own_files])

        assert result.failed_files == [own_files[0].id]
        assert result.deleted_files == [own_files[1].id]
        assert result.deleted_count == 1

    async def test_failed_form_document_delete_propagates(
        self, service, attachments, form_document_gateway
    ):
        own_doc, *_ = attachments
        form_document_gateway.delete.side_effect = GatewayError("down", status_code=500)

        with pytest.raises(GatewayError):
            await service.bulk_delete(SO_5, form_document_ids=[own_doc.id])

    async def test_owner_listing_failure_propagates(
        self, service, form_document_gateway, file_gateway
    ):
        form_document_gateway.get_by_entity.side_effect = GatewayError("down", status_code=503)
        file_gateway.list_files.side_effect = GatewayError("down", status_code=503)

        with pytest.raises(GatewayError):
            await service.bulk_delete(
                EntityRef(EntityType.SALE, 2), form_document_ids=[10, 11], file_ids=["a"]
            )

        form_document_gateway.delete.assert_not_called()
        file_gateway.delete.assert_not_called()

    async def test_file_listing_failure_propagates(self, service, file_gateway):
        file_gateway.list_files.side_effect = GatewayError("down", status_code=503)

        with pytest.raises(GatewayError):
            await service.bulk_delete(SO_5, file_ids=["a"])

        file_gateway.delete.assert_not_called()

    async def test_related_records_are_not_listed(
        self, service, attachments, form_document_gateway, file_gateway
    ):
        own_doc, _, own_files, _ = attachments

        await service.bulk_delete(
            SO_5, form_document_ids=[own_doc.id], file_ids=[own_files[0].id]
        )

        form_document_gateway.get_by_entity.assert_awaited_once_with(EntityType.SERVICE_ORDER, 5)
        file_gateway.list_files.assert_awaited_once_with(ModuleType.SERVICES, "5")
