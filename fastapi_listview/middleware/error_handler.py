"""Error handling middleware for list view pages."""

import logging
from html import escape
from typing import Any

from starlette.responses import HTMLResponse

from fastapi_listview.core.errors import ListViewError

logger = logging.getLogger(__name__)

ERROR_PAGE = """<!DOCTYPE html>
<html>
<head><title>{title}</title></head>
<body>
<h1>{title}</h1>
<p>{detail}</p>
</body>
</html>
"""


class ErrorHandlerMiddleware:
    """Convert exceptions into an HTML error page.

    Configuration errors show their message; any other exception shows a
    generic message so internals are not leaked.
    """

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions raised by the downstream app."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except ListViewError as exc:
            logger.exception("List view configuration error on %s", scope.get("path"))
            await self._error_response(str(exc))(scope, receive, send)
        except Exception:  # noqa: BLE001 - last-resort page
            logger.exception("Unhandled error on %s", scope.get("path"))
            await self._error_response("The page could not be rendered.")(scope, receive, send)

    def _error_response(self, detail: str) -> HTMLResponse:
        title = "Internal Server Error"
        return HTMLResponse(
            ERROR_PAGE.format(title=title, detail=escape(detail)),
            status_code=500,
        )
