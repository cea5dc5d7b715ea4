from flask import current_app, flash, redirect, render_template, request, url_for

from . import bp
from ..catalog import build_catalog_query, run_catalog_query
from ..errors import NotFound
from ..helpers import get_store, request_data
from ..validation import validate_book

SORT_CHOICES = [("", "Default"), ("title", "Title"), ("author", "Author")]


@bp.route("/")
def home():
    return redirect(url_for("views.main"))


@bp.route("/main")
def main():
    return render_template("main.html", active_page="main")


@bp.route("/add", methods=["GET"])
def add_form():
    return render_template("add.html", active_page="add")


@bp.route("/add", methods=["POST"])
def add_book():
    fields = validate_book(request_data())
    book = get_store().create(fields)
    current_app.logger.info("Book added successfully: %s (%s)", book.id, book.title)
    flash("New book added successfully.", "success")
    return redirect(url_for("views.main"))


@bp.route("/catalog")
def catalog():
    query = build_catalog_query(request.args, current_app.config["CATALOG_PAGE_SIZE"])
    page = run_catalog_query(get_store(), query)
    return render_template(
        "catalog.html",
        books=page.books,
        pagination=page.pagination,
        year=request.args.get("year", ""),
        sort=request.args.get("sort", ""),
        limit=query.limit,
        sort_choices=SORT_CHOICES,
        active_page="catalog",
    )


@bp.route("/edit")
def edit_list():
    books = get_store().find_all()
    return render_template("edit.html", books=books, active_page="edit")


# Both edit actions answer with the main view listing every book.
@bp.route("/edit/<book_id>", methods=["PUT"])
def update_book(book_id):
    fields = validate_book(request_data())
    store = get_store()
    store.update_by_id(book_id, fields)
    current_app.logger.info("Book updated: %s", book_id)
    return render_template("main.html", books=store.find_all(), active_page="main")


@bp.route("/edit/<book_id>", methods=["DELETE"])
def delete_book(book_id):
    store = get_store()
    if not store.delete_by_id(book_id):
        raise NotFound()
    current_app.logger.info("Book deleted: %s", book_id)
    return render_template("main.html", books=store.find_all(), active_page="main")
