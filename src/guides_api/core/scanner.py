"""Directory scanner for the route tree.

Walks the routes directory for route.py files and turns each file's
directory path into a URL path:

- guides -> /guides (static segment)
- [guide_id] -> /{guide_id} (path parameter)
- (docs) -> skipped (group folder, not part of the URL)
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from guides_api.exceptions import PathParseError, RouteDiscoveryError


class SegmentType(Enum):
    """Kind of a URL path segment."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    GROUP = "group"


@dataclass(frozen=True)
class PathSegment:
    """A directory name parsed into a URL path segment."""

    name: str
    segment_type: SegmentType
    original: str

    @property
    def is_parameter(self) -> bool:
        return self.segment_type is SegmentType.DYNAMIC

    def to_url_part(self) -> str | None:
        """Render the segment for a FastAPI path, or None for groups."""
        match self.segment_type:
            case SegmentType.STATIC:
                return self.name
            case SegmentType.DYNAMIC:
                return f"{{{self.name}}}"
            case SegmentType.GROUP:
                return None


@dataclass(frozen=True)
class RouteDefinition:
    """A discovered route file and the URL path it serves.

    Attributes:
        path: FastAPI-style path string (e.g., /guides/{guide_id})
        file_path: Absolute path to the route.py file
        segments: Parsed segments of the file's directory path
    """

    path: str
    file_path: Path
    segments: tuple[PathSegment, ...]

    @property
    def parameters(self) -> list[PathSegment]:
        return [s for s in self.segments if s.is_parameter]


_DYNAMIC_PATTERN = re.compile(r"^\[([a-z_][a-z0-9_]*)\]$")
_GROUP_PATTERN = re.compile(r"^\(([a-zA-Z_][a-zA-Z0-9_]*)\)$")
_STATIC_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*$")


def parse_segment(name: str) -> PathSegment:
    """Parse one directory name into a PathSegment.

    Raises:
        PathParseError: If the name matches none of the segment forms.
    """
    if not name:
        raise PathParseError("Empty segment")

    if match := _DYNAMIC_PATTERN.match(name):
        return PathSegment(match.group(1), SegmentType.DYNAMIC, name)

    if match := _GROUP_PATTERN.match(name):
        return PathSegment(match.group(1), SegmentType.GROUP, name)

    if _STATIC_PATTERN.match(name):
        return PathSegment(name, SegmentType.STATIC, name)

    raise PathParseError(
        f"Invalid path segment '{name}'. Use [param], (group), or lowercase-with-dashes."
    )


def segments_to_path(segments: list[PathSegment] | tuple[PathSegment, ...]) -> str:
    """Join segments into a path with a leading slash; no segments gives "/"."""
    parts = [part for s in segments if (part := s.to_url_part()) is not None]
    return "/" + "/".join(parts)


def scan_routes(base_path: Path | str) -> list[RouteDefinition]:
    """Find every route.py under base_path and compute its URL path.

    Args:
        base_path: Root of the route tree.

    Returns:
        One RouteDefinition per discovered route file, in filesystem order.

    Raises:
        RouteDiscoveryError: If base_path doesn't exist or isn't a directory.
        PathParseError: If any directory name has invalid syntax.
    """
    base = Path(base_path).resolve()

    if not base.exists():
        raise RouteDiscoveryError(f"Base path does not exist: {base}")
    if not base.is_dir():
        raise RouteDiscoveryError(f"Base path is not a directory: {base}")

    routes: list[RouteDefinition] = []

    for route_file in base.rglob("route.py"):
        relative_dir = route_file.parent.relative_to(base)

        if "__pycache__" in relative_dir.parts:
            continue
        if any(part.startswith(".") for part in relative_dir.parts):
            continue

        # Symlinks must not lead out of the tree
        if not route_file.resolve().is_relative_to(base):
            continue

        segments = tuple(parse_segment(part) for part in relative_dir.parts)
        routes.append(
            RouteDefinition(
                path=segments_to_path(segments),
                file_path=route_file,
                segments=segments,
            )
        )

    return routes
