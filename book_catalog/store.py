from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional, Sequence

from bson import ObjectId
from mongoengine import connect, disconnect
from mongoengine.errors import OperationError, ValidationError
from pymongo.errors import PyMongoError

from .errors import NotFound, StoreError
from .model import Book

FIELDS = ("title", "author", "genre", "year")


@contextmanager
def _store_call(message: str):
    try:
        yield
    except (PyMongoError, OperationError, ValidationError) as exc:
        raise StoreError(message) from exc


class BookStore:
    """
    Handle on the ``books`` collection.

    The connection is opened explicitly with ``open()`` and released with
    ``close()``; nothing is connected at import time.
    """

    def __init__(self, host: str, client_class=None):
        self.host = host
        self.client_class = client_class
        self.is_open = False

    def open(self) -> "BookStore":
        kwargs = {}
        if self.client_class is not None:
            kwargs["mongo_client_class"] = self.client_class
        with _store_call("Could not connect to the database"):
            connect(host=self.host, **kwargs)
        self.is_open = True
        return self

    def close(self) -> None:
        if self.is_open:
            disconnect()
            self.is_open = False

    def find(
        self,
        query: Optional[Mapping[str, Any]] = None,
        sort: Optional[Sequence[str]] = None,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Book]:
        with _store_call("Error fetching books from the database"):
            qs = Book.objects(**(query or {}))
            if sort:
                qs = qs.order_by(*sort)
            if skip:
                qs = qs.skip(skip)
            if limit:
                qs = qs.limit(limit)
            return list(qs)

    def find_all(self) -> List[Book]:
        return self.find({})

    def count_documents(self, query: Optional[Mapping[str, Any]] = None) -> int:
        with _store_call("Error fetching books from the database"):
            return Book.objects(**(query or {})).count()

    def find_by_id(self, book_id: str) -> Book:
        if not ObjectId.is_valid(book_id):
            raise NotFound()
        with _store_call("Error fetching book from the database"):
            book = Book.objects(id=book_id).first()
        if book is None:
            raise NotFound()
        return book

    def create(self, fields: Dict[str, Any]) -> Book:
        with _store_call("Error saving book to the database"):
            return Book.from_dict(fields).save()

    def update_by_id(self, book_id: str, fields: Dict[str, Any]) -> Book:
        if not ObjectId.is_valid(book_id):
            raise NotFound()
        updates = {f"set__{name}": fields.get(name) for name in FIELDS}
        with _store_call("Error updating book in the database"):
            book = Book.objects(id=book_id).modify(new=True, **updates)
        if book is None:
            raise NotFound()
        return book

    def delete_by_id(self, book_id: str) -> bool:
        """True if a record was removed."""
        if not ObjectId.is_valid(book_id):
            return False
        with _store_call("Error deleting book from the database"):
            return Book.objects(id=book_id).delete() > 0
