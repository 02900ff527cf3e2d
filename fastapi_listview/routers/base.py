"""Router serving list views as HTML pages."""

import logging
from typing import Any, Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from fastapi_listview.widgets.base_list_view import BaseListView

logger = logging.getLogger(__name__)


class ListViewRouter(APIRouter):
    """APIRouter wrapper for list view widgets."""

    def register_view(
        self,
        path: str,
        view: BaseListView | Callable[..., BaseListView],
        *,
        name: str | None = None,
        dependencies: list[Any] | None = None,
    ) -> None:
        """Register a GET route rendering a view for each request.

        Args:
            path: URL path of the page (e.g., "/users")
            view: View instance, or a factory returning one. A factory is
                  resolved per request with dependency injection support.
            name: Route name, defaults to ``"<path>_view"``.
            dependencies: Additional FastAPI dependencies for the route.

        Examples:
            # Register a view instance (no dependency injection)
            router.register_view("/users", GridView(data_provider=provider))

            # Register a factory (with dependency injection)
            def get_users_view(session: Session = Depends(get_session)) -> GridView:
                return GridView(data_provider=SQLAlchemyDataProvider(session=session, model=User))

            router.register_view("/users", get_users_view)

        Endpoints are plain functions, so FastAPI runs them in its threadpool
        and synchronous data providers do not block the event loop.
        """
        is_factory = callable(view) and not isinstance(view, BaseListView)

        if is_factory:

            def factory_endpoint(request: Request, view_instance: Any = Depends(view)) -> HTMLResponse:
                return self.render_view(request, view_instance)

            endpoint: Callable[..., HTMLResponse] = factory_endpoint
        else:

            def instance_endpoint(request: Request) -> HTMLResponse:
                return self.render_view(request, view)

            endpoint = instance_endpoint

        self.add_api_route(
            path,
            endpoint,
            methods=["GET"],
            response_class=HTMLResponse,
            name=name or f"{path}_view",
            dependencies=dependencies,
        )

    def render_view(self, request: Request, view: BaseListView) -> HTMLResponse:
        """Apply the request to view and return the rendered page."""
        configured = view.with_request(
            request.query_params,
            path_params=request.path_params,
            url_path=request.url.path,
        )
        content = configured.render()
        logger.debug("Rendered %s for %s", type(view).__name__, request.url.path)
        return HTMLResponse(content)
