"""Reader catalog DTOs: pure Pydantic."""
from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_WIRE = {"alias_generator": to_camel, "populate_by_name": True}


class BookAuthor(BaseModel):
    model_config = _WIRE

    id: int | str | None = None
    name: str | None = None


class BookFile(BaseModel):
    model_config = _WIRE

    front_page_link: str | None = None
    pdf_path: str | None = None
    audio_path: str | None = None


class CatalogBook(BaseModel):
    model_config = _WIRE

    id: int | str | None = None
    book_id: int | str | None = None
    title: str | None = None
    description: str | None = None
    author: BookAuthor | None = None
    upload_date: datetime | None = None
    created_at: datetime | None = None
    is_free: bool | None = None
    price: float | None = None
    book_files: list[BookFile] = Field(default_factory=list)

    @property
    def key(self) -> int | str | None:
        return self.book_id if self.book_id is not None else self.id

    @property
    def author_name(self) -> str:
        return (self.author.name if self.author else None) or "Unknown"
