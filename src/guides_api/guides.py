"""Guide catalog and the responder that lists it.

The catalog is fixed when the package is built. Nothing at runtime adds,
changes, or removes a guide, so the listing is the same for every caller.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class GuideRecord:
    """A single guide entry.

    Attributes:
        id: Identifier, unique within the catalog.
        title: Display title, never empty.
    """

    id: int
    title: str

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of this record."""
        return asdict(self)


@dataclass(frozen=True)
class GuideListResult:
    """Status code and body produced by list_guides()."""

    status: int
    body: dict[str, list[dict[str, Any]]]


# Display order is the order listed here
GUIDES: tuple[GuideRecord, ...] = (
    GuideRecord(id=1, title="Getting Started with SvelteKit"),
    GuideRecord(id=2, title="Building a SvelteKit Application"),
    GuideRecord(id=3, title="Deploying SvelteKit Apps"),
    GuideRecord(id=4, title="SvelteKit Routing"),
    GuideRecord(id=5, title="State Management in SvelteKit"),
)


def list_guides() -> GuideListResult:
    """List every guide in the catalog.

    The body is rebuilt on each call, so callers may mutate what they get
    back without affecting later calls.

    Returns:
        GuideListResult with status 200 and a body of the form
        {"guides": [{"id": 1, "title": ...}, ...]}.
    """
    return GuideListResult(
        status=200,
        body={"guides": [guide.to_dict() for guide in GUIDES]},
    )
