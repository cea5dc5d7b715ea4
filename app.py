import os

from book_catalog import create_app

app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", "3000"))
    app.logger.info("Server is running at http://localhost:%s", port)
    try:
        app.run(port=port)
    finally:
        app.extensions["book_store"].close()
