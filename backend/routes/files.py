from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

import catalog
import store
from auth import require_session
from models.file_record import FileInput, FileRecord

router = APIRouter(prefix="/api", tags=["files"])


# ---------- Response schemas ----------

class FileWriteResponse(BaseModel):
    success: bool
    id: Optional[int] = None
    file: Optional[FileRecord] = None


class SuccessResponse(BaseModel):
    success: bool


# ---------- Public endpoints ----------

@router.get("/files", response_model=list[FileRecord])
async def list_files(search: Optional[str] = None, category: Optional[str] = None):
    """Every catalog entry, newest first. Optional ?search= and ?category= filters."""
    return await catalog.list_files(store.database, search=search, category=category)


@router.get("/files/{file_id}", response_model=FileRecord)
async def get_file(file_id: int):
    return await catalog.get_file(store.database, file_id)


@router.post("/files/{file_id}/download", response_model=SuccessResponse)
async def record_download(file_id: int):
    """Bumps the download counter. The client calls this right before opening the URL."""
    await catalog.increment_download(store.database, file_id)
    return SuccessResponse(success=True)


@router.get("/categories", response_model=list[str])
async def list_categories():
    return await catalog.list_categories(store.database)


# ---------- Admin endpoints ----------

@router.post("/files", response_model=FileWriteResponse, dependencies=[Depends(require_session)])
async def create_file(body: FileInput):
    record = await catalog.create_file(store.database, body)
    return FileWriteResponse(success=True, id=record.id, file=record)


@router.put("/files/{file_id}", response_model=FileWriteResponse, dependencies=[Depends(require_session)])
async def update_file(file_id: int, body: FileInput):
    record = await catalog.update_file(store.database, file_id, body)
    return FileWriteResponse(success=True, id=record.id, file=record)


@router.delete("/files/{file_id}", response_model=SuccessResponse, dependencies=[Depends(require_session)])
async def delete_file(file_id: int):
    await catalog.delete_file(store.database, file_id)
    return SuccessResponse(success=True)
