from pydantic import BaseModel


class Session(BaseModel):
    token: str
    username: str
    login_time: int     # Unix timestamp in milliseconds
