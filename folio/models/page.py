from typing import List, Optional

from pydantic import BaseModel


class CollectionLink(BaseModel):
    """Summary of one gallery collection (a subdirectory of the gallery root)."""

    name: str
    path: str
    image: Optional[str] = None  # first entry of the collection, None when empty
    img_count: int


class BlogLink(BaseModel):
    name: str
    path: str
    text: str  # raw markup of the post's index document


class DocumentMatch(BaseModel):
    name: str
    path: str
    matching_words: str


class PageData(BaseModel):
    """View model handed to the layout; built per request and thrown away."""

    links: List[CollectionLink] = []
    blog_links: List[BlogLink] = []
    found_documents: List[DocumentMatch] = []
    title: str = ""
    image_column_one: List[str] = []
    image_column_two: List[str] = []
