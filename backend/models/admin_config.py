from typing import Optional
from pydantic import BaseModel


class AdminConfig(BaseModel):
    id: int = 1
    password: str
    updated_at: Optional[str] = None
