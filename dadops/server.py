"""A small WSGI web server with greeting, header, joke and metrics routes."""

from __future__ import annotations

import threading
from collections import Counter
from wsgiref.simple_server import make_server

from dadops.jokes import get_random_joke

WELCOME = "Welcome to my website!"
HELLO = "Here is my first http program"
HELLO2 = "Here is my second http program guys"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"
METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"
METRIC_NAME = "dadops_http_requests_total"
DEFAULT_PORT = 8080


def render_headers(headers):
    """Render ``(name, value)`` pairs as ``name: value`` lines."""
    return "".join(f"{name}: {value}\n" for name, value in headers)


def _request_headers(environ):
    headers = []
    for key, value in environ.items():
        if key.startswith("HTTP_"):
            name = key[5:]
        elif key in ("CONTENT_TYPE", "CONTENT_LENGTH") and value:
            name = key
        else:
            continue
        canonical = "-".join(part.capitalize() for part in name.split("_"))
        headers.append((canonical, value))
    return sorted(headers)


class _RequestMetrics:
    def __init__(self):
        self._lock = threading.Lock()
        self._counts = Counter()

    def observe(self, route):
        with self._lock:
            self._counts[route] += 1

    def render(self):
        with self._lock:
            counts = sorted(self._counts.items())
        lines = [
            f"# HELP {METRIC_NAME} Total HTTP requests served, by route.",
            f"# TYPE {METRIC_NAME} counter",
        ]
        lines.extend(f'{METRIC_NAME}{{route="{route}"}} {count}' for route, count in counts)
        return "\n".join(lines) + "\n"


def create_app(joke_provider=None):
    """Build the WSGI application; ``joke_provider`` returns the text for /joke."""
    provider = joke_provider or get_random_joke
    metrics = _RequestMetrics()
    routes = {
        "/hello": lambda environ: HELLO,
        "/hello2": lambda environ: HELLO2,
        "/headers": lambda environ: render_headers(_request_headers(environ)),
        "/joke": lambda environ: provider(),
        "/metrics": lambda environ: metrics.render(),
    }

    def app(environ, start_response):
        path = environ.get("PATH_INFO") or "/"
        handler = routes.get(path)
        route = path if handler is not None else "/"
        body = handler(environ) if handler is not None else WELCOME
        metrics.observe(route)
        data = body.encode("utf-8")
        content_type = METRICS_CONTENT_TYPE if route == "/metrics" else TEXT_CONTENT_TYPE
        start_response(
            "200 OK",
            [("Content-Type", content_type), ("Content-Length", str(len(data)))],
        )
        return [data]

    return app


def serve(host="", port=DEFAULT_PORT):
    """Serve the application until interrupted."""
    app = create_app()
    with make_server(host, port, app) as httpd:
        print("Server up and running....")
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            pass