"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import FormDocumentFactory, UploadedFileFactory
"""

from tests.factories.documents import (
    FormDocumentFactory,
    UploadedFileFactory,
    next_id,
    utc_now,
)

__all__ = [
    "FormDocumentFactory",
    "UploadedFileFactory",
    "next_id",
    "utc_now",
]
