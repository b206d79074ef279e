from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__

GREETING = "<h1>Hello, World version3</h1>"

# Every method the route answers directly. Anything else reaches the
# exception handler below as a 405 and is answered the same way.
METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]

# /docs, /redoc and /openapi.json would otherwise shadow the catch-all route.
app = FastAPI(
    title="Greeter",
    version=__version__,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


# === Helpers ===


def greeting_response() -> HTMLResponse:
    return HTMLResponse(content=GREETING, status_code=200)


# === Greeting ===


@app.api_route("/{path:path}", methods=METHODS, response_class=HTMLResponse)
async def greet(path: str) -> HTMLResponse:
    """Answer any request on any path with the fixed greeting.

    The request is never inspected: method, headers, query and body are all
    ignored, and the body is left unread.
    """
    return greeting_response()


@app.exception_handler(StarletteHTTPException)
async def greet_on_http_error(request: Request, exc: StarletteHTTPException) -> HTMLResponse:
    return greeting_response()
