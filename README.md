# filehttp

A small HTTP/1.1 file server and a matching interactive downloader, using
plain TCP sockets and nothing outside the standard library.

## Installation

```
pip install .
```

## The server

```
filehttp-server [IP PORT]
```

With no arguments the server listens on `127.0.0.1:2569`. Pass both an IP
address and a port to listen elsewhere; any other number of arguments, or a
port that is not a number, is an error.

Every connection is served on its own thread. The server reads one request
of up to 1024 bytes, takes the second space-separated word as the route,
drops its leading `/`, and answers with that file, relative to the
directory the server was started in. So `GET /docs/page.html HTTP/1.1` is
answered with `docs/page.html`. Known extensions (`txt`, `html`, `css`,
`gif`, `jpeg`, `png`, `jpg`) get a matching `Content-Type`; any other file
is sent as `application/octet-stream`. A file that cannot be read gets a
`404 Not Found` page. Each response is followed by a single NUL byte and
the connection is closed.

While it runs, the server reads commands from standard input:

| Command | Effect                                         |
|---------|------------------------------------------------|
| `/end`  | stop accepting connections and shut down       |
| `/cls`  | clear the terminal and show the address again |

End of input also shuts the server down.

## The client

```
filehttp-client
```

At the `>>` prompt, enter a URL of the form

```
http://127.0.0.1:2569/path/to/file.png
```

The scheme must be `http` or `https`, the host a dotted IPv4 address, a
port must be given, and the path must not end in `/`. The client tries to
connect up to six times, one second apart. The body of the reply is saved
under `download/` (relative to the current directory, which must already
exist) with the last part of the path as its name. A `404` reply is
reported and nothing is saved.

Commands at the prompt:

| Command | Effect             |
|---------|--------------------|
| `/end`  | close the client   |
| `/cls`  | clear the terminal |

## Using it from Python

```python
from filehttp.client import Client, parse_url, create_request

url = parse_url("http://127.0.0.1:2569/images/logo.png")
print(url.host, url.port, url.path)
print(create_request(url.path))   # GET /images/logo.png HTTP/1.1

saved = Client("downloads").fetch("http://127.0.0.1:2569/images/logo.png")
```

`parse_url` raises `UrlError` for a URL it does not accept. `download` and
`Client.fetch` raise `DownloadError`, or its subclass `NotFoundError` for a
`404`; `Client.connect` raises `ConnectionError` when every attempt fails.

`filehttp.http` has the server-side pieces: `mime_type`,
`read_http_request`, `build_response`, `read_file` and `handle_client`.
`filehttp.server.Server` ties them to a listening socket, with `start`,
`wait_connection`, `command`, `banner` and `close`.

## What it does not do

The server ignores the request method and all headers, and does not keep
connections open. It does not confine routes to a document root: any file
the server process can read may be requested. There is no directory
listing, no logging of requests, and no TLS; an `https` URL is accepted by
the client but spoken to in plain HTTP.

## Running the tests

```
pip install .[test]
pytest
```