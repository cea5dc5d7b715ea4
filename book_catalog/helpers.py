from flask import current_app, request

from .store import BookStore


def get_store() -> BookStore:
    return current_app.extensions["book_store"]


def request_data():
    """JSON object body if there is one, otherwise the submitted form."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form
