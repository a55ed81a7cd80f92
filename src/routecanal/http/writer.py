"""ResponseWriter — the response sink handed to route handlers.

Handlers write into it; once the handler returns, the router snapshots
it into an immutable ``Response``. One writer per request, never shared.
"""

from routecanal.http.response import Response


class ResponseWriter:
    """Mutable, buffered response under construction.

    Usage inside a handler::

        def about(writer, request, params):
            writer.set_header("X-Page", "about")
            writer.write("<h1>About</h1>")
    """

    __slots__ = ("_chunks", "_headers", "content_type", "status")

    def __init__(self) -> None:
        self.status: int = 200
        self.content_type: str = "text/html; charset=utf-8"
        self._headers: list[tuple[str, str]] = []
        self._chunks: list[bytes] = []

    def set_status(self, status: int) -> None:
        """Set the response status code."""
        self.status = status

    def set_header(self, name: str, value: str) -> None:
        """Replace any existing values of *name* with *value*."""
        if name.lower() == "content-type":
            self.content_type = value
            return
        wanted = name.lower()
        self._headers = [(k, v) for k, v in self._headers if k.lower() != wanted]
        self._headers.append((name, value))

    def add_header(self, name: str, value: str) -> None:
        """Append a header value, keeping earlier ones (e.g. ``Set-Cookie``)."""
        self._headers.append((name, value))

    def write(self, data: str | bytes) -> int:
        """Append *data* to the body. Returns the number of bytes written."""
        chunk = data.encode("utf-8") if isinstance(data, str) else data
        self._chunks.append(chunk)
        return len(chunk)

    @property
    def written(self) -> int:
        """Total body bytes written so far."""
        return sum(len(chunk) for chunk in self._chunks)

    def to_response(self) -> Response:
        """Snapshot the writer into an immutable Response."""
        return Response(
            body=b"".join(self._chunks),
            status=self.status,
            content_type=self.content_type,
            headers=tuple(self._headers),
        )
