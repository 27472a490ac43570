# server.py
import http.server
import os
import socketserver
from collections import namedtuple
from types import MappingProxyType
from urllib.parse import urlsplit

HOST = "0.0.0.0"
PORT = 8080
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

MIME_TYPES = MappingProxyType({
    '.html': 'text/html',
    '.js': 'application/javascript',
    '.wasm': 'application/wasm',
    '.css': 'text/css',
    '.json': 'application/json',
})
DEFAULT_TYPE = 'application/octet-stream'

NOT_FOUND_BODY = b'Not Found'
NOT_FOUND_TYPE = 'text/plain; charset=utf-8'

# path is set for a file to stream, body for a literal payload
Response = namedtuple('Response', ['status', 'content_type', 'path', 'body'])


def content_type(path):
    """Look up the MIME type for everything after the last '.' in path."""
    dot = path.rfind('.')
    if dot == -1:
        return DEFAULT_TYPE
    return MIME_TYPES.get(path[dot:], DEFAULT_TYPE)


def request_path(url):
    # percent-escapes stay encoded, so %2f never becomes a path separator
    path = urlsplit(url).path
    if path in ('', '/'):
        return '/index.html'
    return path


def resolve_path(url, base_dir=BASE_DIR):
    """Join the request path onto base_dir.

    The join is lexical only: '..' segments are collapsed, not rejected, so a
    request can name a file outside base_dir.
    """
    return os.path.normpath(os.path.join(base_dir, request_path(url).lstrip('/')))


def handle(url, base_dir=BASE_DIR):
    path = request_path(url)
    file_path = resolve_path(url, base_dir)
    if os.path.isfile(file_path):
        return Response(200, content_type(path), file_path, None)
    return Response(404, NOT_FOUND_TYPE, None, NOT_FOUND_BODY)


class StaticFileHandler(http.server.SimpleHTTPRequestHandler):
    def __init__(self, *args, directory=None, **kwargs):
        super().__init__(*args, directory=directory or BASE_DIR, **kwargs)

    def _respond(self, include_body=True):
        response = handle(self.path, self.directory)
        if response.path is None:
            self.send_response(response.status)
            self.send_header('Content-Type', response.content_type)
            self.send_header('Content-Length', str(len(response.body)))
            self.end_headers()
            if include_body:
                self.wfile.write(response.body)
            return

        # open and stream failures propagate to the server's handle_error
        with open(response.path, 'rb') as f:
            self.send_response(response.status)
            self.send_header('Content-Type', response.content_type)
            self.send_header('Content-Length', str(os.fstat(f.fileno()).st_size))
            self.end_headers()
            if include_body:
                self.copyfile(f, self.wfile)

    def do_GET(self):
        self._respond()

    def do_HEAD(self):
        self._respond(include_body=False)

    def __getattr__(self, name):
        # every other method, known or not, is served as a GET
        if name.startswith('do_'):
            return self.do_GET
        raise AttributeError(name)


class StaticFileServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True


def make_server(host=HOST, port=PORT, directory=BASE_DIR):
    def handler(*args, **kwargs):
        return StaticFileHandler(*args, directory=directory, **kwargs)
    return StaticFileServer((host, port), handler)


def main():
    with make_server() as httpd:
        print(f"Server running at http://localhost:{httpd.server_address[1]}")
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")


if __name__ == "__main__":
    main()
