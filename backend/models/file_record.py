from typing import Optional
from pydantic import BaseModel


class FileRecord(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    url: str
    category: Optional[str] = "uncategorized"
    size: Optional[int] = 0        # bytes
    type: Optional[str] = None     # extension, e.g. "pdf"
    downloads: int = 0
    created_at: Optional[str] = None   # "YYYY-MM-DD HH:MM:SS", UTC


class FileInput(BaseModel):
    """Admin-submitted fields for create/update. name and url are checked by the service."""
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    category: Optional[str] = None
    size: Optional[int] = None
    type: Optional[str] = None
