import functools
import http.server
from dataclasses import dataclass
from pathlib import Path

from .config import HOST, PORT, PUBLIC_DIR


@dataclass
class ServerConfig:
    directory: Path = PUBLIC_DIR
    host: str = HOST
    port: int = PORT

    @property
    def url(self) -> str:
        return f"http://{self.host or 'localhost'}:{self.port}/"


def make_server(config: ServerConfig) -> http.server.ThreadingHTTPServer:
    """Bind a static file server for config.directory. Raises OSError if the port is taken."""
    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(config.directory))
    return http.server.ThreadingHTTPServer((config.host, config.port), handler)


def serve(config: ServerConfig):
    httpd = make_server(config)
    print(f"Serving {config.directory} at {config.url}")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        print("Shutting down server.")
    finally:
        httpd.server_close()
