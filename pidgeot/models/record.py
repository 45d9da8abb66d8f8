from datetime import datetime

from beanie import Document
from pydantic import Field


class Record(Document):
    name: str
    category: str = ""
    tag: str = ""
    attributes: dict = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "records"
        indexes = [
            [("category", 1), ("created_at", -1)],
        ]
