"""Debug utilities for dumping HTTP exchanges."""

import httpx

MASKED_HEADERS = {b"authorization"}


def _format_headers(headers: httpx.Headers) -> list[str]:
    lines = []
    for name, value in headers.raw:
        if name.lower() in MASKED_HEADERS:
            # Keep the scheme ("token", "Bearer") so the dump shows which was sent
            scheme = value.split(b" ", 1)[0] if b" " in value else b""
            value = (scheme + b" ***").strip()
        lines.append(f"{name.decode('latin-1')}: {value.decode('latin-1')}")
    return lines


def dump_request(request: httpx.Request) -> str:
    """Render a request as request line, headers and body."""
    target = request.url.raw_path.decode("ascii")
    lines = [f"{request.method} {target} HTTP/1.1"]
    lines.extend(_format_headers(request.headers))
    body = request.content.decode("utf-8", errors="replace")
    return "\r\n".join(lines) + "\r\n\r\n" + body


def dump_response(response: httpx.Response) -> str:
    """Render a response as status line, headers and body.

    The response must already be read.
    """
    lines = [
        f"{response.http_version} {response.status_code} {response.reason_phrase}".rstrip()
    ]
    lines.extend(_format_headers(response.headers))
    body = response.content.decode("utf-8", errors="replace")
    return "\r\n".join(lines) + "\r\n\r\n" + body


def dump_exchange(response: httpx.Response) -> str:
    """Render the request that produced a response together with the response."""
    return (
        "Request: "
        + dump_request(response.request)
        + "\nResponse: "
        + dump_response(response)
    )
