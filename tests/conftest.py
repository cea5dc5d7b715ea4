import mongomock
import pytest

from book_catalog import create_app
from book_catalog.model import Book


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "MONGODB_HOST": "mongodb://localhost:27017/book_catalog_test",
        "MONGODB_CLIENT_CLASS": mongomock.MongoClient,
    })
    yield app
    Book.drop_collection()
    app.extensions["book_store"].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["book_store"]


@pytest.fixture
def make_book(store):
    def _make(title="Dune", author="Frank Herbert", genre="Sci-Fi", year=1965):
        return store.create({"title": title, "author": author, "genre": genre, "year": year})
    return _make
