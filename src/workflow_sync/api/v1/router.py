from fastapi import APIRouter

from src.workflow_sync.api.v1 import attachments, chains, checklists, documents, propagation

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(chains.router)
api_router.include_router(propagation.router)
api_router.include_router(attachments.router)
api_router.include_router(documents.router)
api_router.include_router(checklists.router)
