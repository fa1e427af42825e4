from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import partial
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Optional
from urllib.parse import unquote

from .config import INDEX_NAME, SiteConfig
from .errors import ServerFailure
from .paths import HTML_SUFFIX

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
NOT_FOUND_BODY = b"404 Not Found"


@dataclass(frozen=True)
class Response:
    status: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)


def _inside(root: str, candidate: str) -> Optional[str]:
    full = os.path.normpath(candidate)
    if full != root and not full.startswith(root + os.sep):
        return None
    return full


def _read_bytes(path: Optional[str]) -> Optional[bytes]:
    if path is None or not os.path.isfile(path):
        return None
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError:
        return None


def try_serve_html(path: str, root: str) -> Optional[Response]:
    data = _read_bytes(_inside(root, f"{root}{path}{HTML_SUFFIX}"))
    if data is None:
        return None
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return Response(HTTPStatus.OK, data, {"Content-Type": HTML_CONTENT_TYPE})


def try_serve_static(path: str, root: str) -> Optional[Response]:
    data = _read_bytes(_inside(root, f"{root}{path}"))
    if data is None:
        return None
    return Response(HTTPStatus.OK, data)


def resolve_request(request_path: str, public_root: Path, index_name: str = INDEX_NAME) -> Response:
    root = os.path.normpath(os.path.abspath(public_root))
    original = unquote(request_path.split("?", 1)[0].split("#", 1)[0])
    path = original
    if not path or path.endswith("/"):
        path += index_name
    if path and not path.startswith("/"):
        path = "/" + path
    if original and not original.startswith("/"):
        original = "/" + original

    response = try_serve_html(path, root)
    if response is not None:
        return response
    response = try_serve_static(original, root)
    if response is not None:
        return response
    return Response(HTTPStatus.NOT_FOUND, NOT_FOUND_BODY, {"Content-Type": "text/plain; charset=utf-8"})


class PreviewHandler(BaseHTTPRequestHandler):
    def __init__(self, *args, public_root: Path, index_name: str = INDEX_NAME, **kwargs) -> None:
        self.public_root = public_root
        self.index_name = index_name
        super().__init__(*args, **kwargs)

    def do_GET(self) -> None:
        response = resolve_request(self.path, self.public_root, self.index_name)
        self.send_response(response.status)
        for name, value in response.headers.items():
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(response.body)))
        self.end_headers()
        self.wfile.write(response.body)


def make_server(config: SiteConfig) -> ThreadingHTTPServer:
    handler = partial(PreviewHandler, public_root=config.output, index_name=config.index_name)
    try:
        return ThreadingHTTPServer((config.host, config.port), handler)
    except OSError as exc:
        raise ServerFailure(f"{config.host}:{config.port}", exc.strerror or str(exc)) from exc


def serve(config: SiteConfig) -> None:
    httpd = make_server(config)
    print(f"Serving from: {config.output}")
    print(f"Visit: http://localhost:{config.port}")
    try:
        httpd.serve_forever()
    finally:
        httpd.server_close()
