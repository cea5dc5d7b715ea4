from urllib.parse import parse_qs


class MethodOverrideMiddleware:
    """
    Lets HTML forms reach PUT/DELETE routes.

    A POST whose query string carries ``_method=PUT`` (or which sends an
    ``X-HTTP-Method-Override`` header) is dispatched as that method.
    """

    allowed_methods = frozenset(["PUT", "DELETE", "PATCH"])

    def __init__(self, app, param="_method"):
        self.app = app
        self.param = param

    def __call__(self, environ, start_response):
        if environ.get("REQUEST_METHOD", "").upper() == "POST":
            method = self._requested_method(environ)
            if method in self.allowed_methods:
                environ["REQUEST_METHOD"] = method
        return self.app(environ, start_response)

    def _requested_method(self, environ):
        header = environ.get("HTTP_X_HTTP_METHOD_OVERRIDE")
        if header:
            return header.upper()
        values = parse_qs(environ.get("QUERY_STRING", "")).get(self.param)
        return values[0].upper() if values else None
