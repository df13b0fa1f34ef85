"""Router factory for the route tree.

Composes the scanner and importer into a FastAPI APIRouter.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from fastapi import APIRouter

from guides_api.core.importer import load_route
from guides_api.core.scanner import RouteDefinition, scan_routes
from guides_api.exceptions import DuplicateRouteError

logger = logging.getLogger(__name__)

# Convention-based default status codes by HTTP method
DEFAULT_STATUS_CODES: dict[str, int] = {
    "post": 201,  # Created
    "delete": 204,  # No Content
}


def create_router_from_path(
    base_path: str | Path,
    *,
    prefix: str = "",
) -> APIRouter:
    """Create a FastAPI APIRouter from a directory of route.py files.

    Args:
        base_path: Root directory containing route.py files.
        prefix: Optional URL prefix for all discovered routes.

    Returns:
        An APIRouter with every discovered handler registered.

    Raises:
        RouteDiscoveryError: If base_path doesn't exist or isn't a directory.
        PathParseError: If a directory name has invalid syntax.
        RouteValidationError: If a route file has invalid exports or fails to import.
        DuplicateRouteError: If two route files resolve to the same path+method.

    Example:
        app = FastAPI()
        app.include_router(create_router_from_path("routes"))
    """
    base = Path(base_path).resolve()
    route_defs = scan_routes(base)

    logger.info(
        "Discovered route files",
        extra={"count": len(route_defs), "base_path": str(base)},
    )

    router = APIRouter(prefix=prefix)

    # Static before dynamic, shorter before longer, then alphabetical
    sorted_routes = sorted(
        route_defs,
        key=lambda r: (len(r.parameters), len(r.segments), r.path),
    )

    registered = _register_route_handlers(router, sorted_routes, base)

    logger.info(
        "Route registration complete",
        extra={"route_count": len(registered), "prefix": prefix or "(none)"},
    )

    return router


def _register_route_handlers(
    router: APIRouter,
    sorted_routes: list[RouteDefinition],
    base_path: Path,
) -> dict[tuple[str, str], Path]:
    """Load each route file and add its handlers to the router.

    Returns:
        Mapping of (path, METHOD) to the file that registered it.

    Raises:
        DuplicateRouteError: If two route files resolve to the same path+method.
    """
    registered: dict[tuple[str, str], Path] = {}

    for route_def in sorted_routes:
        extracted = load_route(route_def.file_path, base_path=base_path)
        tags = extracted.metadata.tags or _derive_tags(route_def.path)

        for method, handler in extracted.handlers.items():
            route_key = (route_def.path, method.upper())
            if route_key in registered:
                raise DuplicateRouteError(
                    f"Duplicate route: {method.upper()} {route_def.path}\n"
                    f"  First: {registered[route_key]}\n"
                    f"  Second: {route_def.file_path}"
                )
            registered[route_key] = route_def.file_path

            _add_route(
                router,
                path=route_def.path,
                method=method,
                handler=handler,
                tags=tags,
                summary=extracted.metadata.summary,
                deprecated=extracted.metadata.deprecated,
            )

            logger.debug(
                "Registered route",
                extra={
                    "method": method.upper(),
                    "path": route_def.path,
                    "file": str(route_def.file_path),
                },
            )

    return registered


def _add_route(
    router: APIRouter,
    *,
    path: str,
    method: str,
    handler: Callable[..., Any],
    tags: list[str],
    summary: str | None,
    deprecated: bool,
) -> None:
    kwargs: dict[str, Any] = {
        "tags": tags,
        "deprecated": deprecated,
        # Handler docstring doubles as the OpenAPI description
        "description": handler.__doc__,
    }
    if summary is not None:
        kwargs["summary"] = summary
    if method in DEFAULT_STATUS_CODES:
        kwargs["status_code"] = DEFAULT_STATUS_CODES[method]

    router.add_api_route(path, handler, methods=[method.upper()], **kwargs)


def _derive_tags(path: str) -> list[str]:
    """Use the first static segment of a path as its OpenAPI tag.

    Examples:
        /guides/{guide_id} -> ["guides"]
        /{guide_id} -> ["root"]
        / -> ["root"]
    """
    parts = [p for p in path.split("/") if p and not p.startswith("{")]
    return [parts[0]] if parts else ["root"]
