"""Exception hierarchy for the guides service."""


class GuidesAPIError(Exception):
    """Base exception for all errors raised by the guides_api package.

    Catching this exception catches configuration and routing errors
    alike. Every subclass is raised while the application is being built,
    never while a request is being served.

    Example:
        try:
            app = create_app()
        except GuidesAPIError as e:
            logger.error(f"Failed to start guides service: {e}")
    """


class ConfigurationError(GuidesAPIError):
    """Raised when an environment setting has an invalid value.

    Example:
        ConfigurationError("GUIDES_API_PORT must be between 1 and 65535, got '0'")
    """


class FileBasedRoutingError(GuidesAPIError):
    """Base exception for errors while turning a route tree into a router."""


class PathParseError(FileBasedRoutingError):
    """Raised when a directory name in the route tree has invalid syntax.

    Examples of invalid names:
        - Uppercase static segments: Guides
        - Unclosed parameters: [guide_id
        - Parameter names that are not identifiers: [123]
    """


class RouteDiscoveryError(FileBasedRoutingError):
    """Raised when the routes directory doesn't exist or isn't a directory.

    Example:
        RouteDiscoveryError("Base path does not exist: /srv/app/routes")
    """


class RouteValidationError(FileBasedRoutingError):
    """Raised for invalid exports, unsafe paths, or import errors in route.py.

    Example:
        RouteValidationError(
            "Invalid export(s) ['format_title'] in route.py\\n"
            "  File: /srv/app/routes/guides/route.py"
        )
    """


class DuplicateRouteError(FileBasedRoutingError):
    """Raised when two route files resolve to the same path+method.

    Example:
        DuplicateRouteError(
            "Duplicate route: GET /guides\\n"
            "  First: /srv/app/routes/guides/route.py\\n"
            "  Second: /srv/app/routes/(docs)/guides/route.py"
        )
    """
