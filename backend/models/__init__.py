from models.admin_config import AdminConfig
from models.file_record import FileInput, FileRecord
from models.session import Session

__all__ = ["AdminConfig", "FileInput", "FileRecord", "Session"]
