from typing import Any, Dict

from mongoengine import Document, IntField, StringField

from .validation import MAX_YEAR, MIN_YEAR


class Book(Document):
    meta = {"collection": "books", "indexes": ["title", "author", "year"], "strict": False}
    title  = StringField(required=True)
    author = StringField(required=True)
    genre  = StringField()
    year   = IntField(required=True, min_value=MIN_YEAR, max_value=MAX_YEAR)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "title": self.title,
            "author": self.author,
            "genre": self.genre,
            "year": self.year,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]):
        return cls(
            title=d.get("title"),
            author=d.get("author"),
            genre=d.get("genre"),
            year=d.get("year"),
        )
