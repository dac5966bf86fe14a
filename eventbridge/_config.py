from typing import Optional

from pydantic import BaseModel


class Config(BaseModel):
    region: str
    endpoint_url: Optional[str] = None
