"""Route module importer.

Imports route.py files by path and extracts their HTTP method handlers.
Only verb-named functions may be public in a route module.
"""

import hashlib
import importlib.util
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any

from guides_api.exceptions import RouteValidationError

# HTTP methods that can be exported from route.py files
ALLOWED_HANDLERS: frozenset[str] = frozenset(
    {"get", "post", "put", "patch", "delete", "head", "options"}
)

# Namespace for imported route modules in sys.modules
MODULE_PREFIX = "_guides_api_routes"


@dataclass(frozen=True)
class RouteMetadata:
    """OpenAPI metadata read from a route module's constants.

    Attributes:
        tags: Value of TAGS, if set.
        summary: Value of SUMMARY, if set.
        deprecated: Value of DEPRECATED, default False.
    """

    tags: list[str] | None = None
    summary: str | None = None
    deprecated: bool = False


@dataclass(frozen=True)
class ExtractedRoute:
    """Handlers and metadata extracted from a route.py module."""

    handlers: dict[str, Callable[..., Any]]
    metadata: RouteMetadata


def _validate_file_path(file_path: Path, *, base_path: Path | None = None) -> Path:
    """Check that file_path is a route.py inside base_path and resolve it.

    Raises:
        RouteValidationError: If the path is unsafe or not a route file.
    """
    if ".." in file_path.parts:
        raise RouteValidationError(f"Path traversal detected in file path: {file_path}")

    resolved_path = file_path.resolve()

    if base_path is not None:
        resolved_base = base_path.resolve()
        if not resolved_path.is_relative_to(resolved_base):
            raise RouteValidationError(
                f"Route file outside allowed directory: {resolved_path}\n"
                f"Allowed base: {resolved_base}"
            )

    if resolved_path.name != "route.py":
        raise RouteValidationError(f"Invalid route file name: {resolved_path.name}")

    return resolved_path


def _module_name_for(file_path: Path) -> str:
    # Directory names like [guide_id] or (docs) aren't identifiers, so the
    # name is keyed on a digest of the resolved path instead.
    digest = hashlib.sha1(str(file_path).encode()).hexdigest()[:16]
    return f"{MODULE_PREFIX}_{digest}"


def import_route_module(file_path: Path, *, base_path: Path | None = None) -> ModuleType:
    """Import a route.py file as a Python module.

    Importing the same file twice returns the module from the first import.

    Args:
        file_path: Path to the route.py file.
        base_path: Optional base directory the file must live under.

    Returns:
        The imported module.

    Raises:
        RouteValidationError: If the path is invalid, the file doesn't
            exist, or executing the module fails.
    """
    validated_path = _validate_file_path(file_path, base_path=base_path)

    if not validated_path.exists():
        raise RouteValidationError(f"Route file does not exist: {validated_path}")

    module_name = _module_name_for(validated_path)
    if module_name in sys.modules:
        return sys.modules[module_name]

    spec = importlib.util.spec_from_file_location(module_name, validated_path)
    if spec is None or spec.loader is None:
        raise RouteValidationError(f"Cannot create module spec for: {validated_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module

    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        del sys.modules[module_name]
        raise RouteValidationError(
            f"Failed to import module: {validated_path}\nError: {type(exc).__name__}: {exc}"
        ) from exc

    return module


def extract_handlers(module: ModuleType, file_path: Path) -> ExtractedRoute:
    """Collect the HTTP method handlers and metadata of a route module.

    Args:
        module: The imported route module.
        file_path: Path to the route file (for error messages).

    Returns:
        ExtractedRoute with handlers keyed by lowercase method name.

    Raises:
        RouteValidationError: If the module defines public functions that
            are not HTTP verbs.
    """
    tags = getattr(module, "TAGS", None)
    metadata = RouteMetadata(
        tags=list(tags) if tags else None,
        summary=getattr(module, "SUMMARY", None),
        deprecated=bool(getattr(module, "DEPRECATED", False)),
    )

    handlers: dict[str, Callable[..., Any]] = {}
    invalid_exports: list[str] = []

    for name, obj in vars(module).items():
        # Private helpers and constants (TAGS, SUMMARY, ...)
        if name.startswith("_") or name.isupper():
            continue
        if not callable(obj):
            continue
        # Imported functions and classes belong to other modules
        if getattr(obj, "__module__", None) != module.__name__:
            continue

        if name in ALLOWED_HANDLERS:
            handlers[name] = obj
        else:
            invalid_exports.append(name)

    if invalid_exports:
        raise RouteValidationError(
            f"Invalid export(s) {sorted(invalid_exports)} in route.py\n"
            f"  File: {file_path}\n"
            f"  Hint: Only HTTP verbs ({', '.join(sorted(ALLOWED_HANDLERS))}) are allowed.\n"
            f"        Prefix helper functions with underscore: _{invalid_exports[0]}"
        )

    return ExtractedRoute(handlers=handlers, metadata=metadata)


def load_route(file_path: Path, *, base_path: Path | None = None) -> ExtractedRoute:
    """Import a route.py file and extract its handlers."""
    module = import_route_module(file_path, base_path=base_path)
    return extract_handlers(module, file_path)
