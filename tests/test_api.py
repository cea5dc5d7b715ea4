from bson import ObjectId


def test_get_book(client, make_book):
    book = make_book()
    resp = client.get(f"/api/books/{book.id}")
    assert resp.status_code == 200
    assert resp.get_json() == {
        "id": str(book.id),
        "title": "Dune",
        "author": "Frank Herbert",
        "genre": "Sci-Fi",
        "year": 1965,
    }


def test_get_missing_book(client):
    resp = client.get(f"/api/books/{ObjectId()}")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Book not found"}


def test_get_malformed_id(client):
    assert client.get("/api/books/12345").status_code == 404


def test_update_book(client, make_book):
    book = make_book()
    resp = client.put(f"/api/books/{book.id}", json={
        "title": "Dune", "author": "Frank Herbert", "genre": "Classic", "year": 1965,
    })
    assert resp.status_code == 200
    assert resp.get_json()["genre"] == "Classic"


def test_update_book_invalid_year(client, make_book):
    book = make_book()
    resp = client.put(f"/api/books/{book.id}", json={"title": "Dune", "author": "FH", "year": "MCMLXV"})
    assert resp.status_code == 400
    assert "between 1500 and 2024" in resp.get_json()["error"]


def test_update_missing_book(client):
    resp = client.put(f"/api/books/{ObjectId()}", json={"title": "A", "author": "B", "year": 2000})
    assert resp.status_code == 404


def test_delete_book(client, make_book):
    book = make_book()
    resp = client.delete(f"/api/books/{book.id}")
    assert resp.status_code == 200
    assert resp.data == b"Book deleted successfully"
    assert client.get(f"/api/books/{book.id}").status_code == 404


def test_delete_missing_book(client):
    assert client.delete(f"/api/books/{ObjectId()}").status_code == 404


def test_list_books(client, make_book):
    for year in (1999, 2001, 1999):
        make_book(year=year)
    resp = client.get("/api/books?year=1999&limit=1")
    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["books"]) == 1
    assert body["pagination"] == {"totalItems": 2, "totalPages": 2, "currentPage": 1}


def test_unknown_api_route_is_json(client):
    resp = client.get("/api/authors")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_method_override_header(client, make_book):
    book = make_book()
    resp = client.post(f"/api/books/{book.id}", headers={"X-HTTP-Method-Override": "DELETE"})
    assert resp.status_code == 200
    assert client.get(f"/api/books/{book.id}").status_code == 404


def test_list_books_page_too_large_is_json(client):
    resp = client.get("/api/books?page=100000000000000000000000&limit=10")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "'page' is too large"}
