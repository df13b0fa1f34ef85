"""Guide catalog service built on FastAPI with file-based routes."""

# Configuration
from guides_api.config import Settings

# Core types — for advanced users and type checking
from guides_api.core.importer import ExtractedRoute, RouteMetadata
from guides_api.core.scanner import PathSegment, RouteDefinition, SegmentType

# Exceptions — for error handling
from guides_api.exceptions import (
    ConfigurationError,
    DuplicateRouteError,
    FileBasedRoutingError,
    GuidesAPIError,
    PathParseError,
    RouteDiscoveryError,
    RouteValidationError,
)

# Guide catalog — the primary API
from guides_api.guides import GUIDES, GuideListResult, GuideRecord, list_guides

# Routing
from guides_api.router import create_router_from_path

__all__ = [
    # Guide catalog
    "GUIDES",
    "GuideListResult",
    "GuideRecord",
    "list_guides",
    # Routing and configuration
    "create_router_from_path",
    "Settings",
    # Core types
    "ExtractedRoute",
    "PathSegment",
    "RouteDefinition",
    "RouteMetadata",
    "SegmentType",
    # Exceptions
    "ConfigurationError",
    "DuplicateRouteError",
    "FileBasedRoutingError",
    "GuidesAPIError",
    "PathParseError",
    "RouteDiscoveryError",
    "RouteValidationError",
]

__version__ = "1.0.0"
