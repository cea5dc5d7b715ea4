from flask import current_app, jsonify, request

from . import bp
from ..catalog import build_catalog_query, run_catalog_query
from ..errors import NotFound
from ..helpers import get_store, request_data
from ..validation import validate_book


@bp.route("/books")
def list_books():
    query = build_catalog_query(request.args, current_app.config["CATALOG_PAGE_SIZE"])
    page = run_catalog_query(get_store(), query)
    return jsonify(
        books=[b.to_dict() for b in page.books],
        pagination=page.pagination.to_dict(),
    )


@bp.route("/books/<book_id>", methods=["GET"])
def get_book(book_id):
    return jsonify(get_store().find_by_id(book_id).to_dict())


@bp.route("/books/<book_id>", methods=["PUT"])
def update_book(book_id):
    fields = validate_book(request_data())
    book = get_store().update_by_id(book_id, fields)
    current_app.logger.info("Book updated via API: %s", book_id)
    return jsonify(book.to_dict())


@bp.route("/books/<book_id>", methods=["DELETE"])
def delete_book(book_id):
    if not get_store().delete_by_id(book_id):
        raise NotFound()
    current_app.logger.info("Book deleted via API: %s", book_id)
    return "Book deleted successfully", 200, {"Content-Type": "text/plain; charset=utf-8"}
