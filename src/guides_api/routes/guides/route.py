"""Guide catalog endpoint."""

from guides_api.guides import list_guides

TAGS = ["guides"]
SUMMARY = "List guides"


async def get() -> dict:
    """Return every guide in the catalog, in display order."""
    return list_guides().body
