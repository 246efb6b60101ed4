"""Protocol interfaces for infrastructure collaborators."""

from typing import Protocol


class RenderedPageFetcherProtocol(Protocol):
    """Protocol for fetching a fully rendered page."""

    async def get_rendered_html(self, url: str) -> str:
        """Load url and return the rendered document HTML."""
        ...
