"""
Address resolution: free-form text to a single best coordinate.
"""

import logging

from ..constants import ErrorMessages
from ..exceptions import ResolutionError, UpstreamError
from .naver import NaverMapsClient
from .types import ResolvedAddress

logger = logging.getLogger(__name__)


class AddressResolver:
    """Resolves an address string to the first geocoding candidate."""

    def __init__(self, client: NaverMapsClient):
        self._client = client

    async def resolve(self, query: str) -> ResolvedAddress:
        """Geocode ``query`` and take the head candidate.

        A synthetic (fallback) result that still has candidates resolves;
        its source tag is carried on the returned record.

        Raises:
            ResolutionError: If the query is blank, the request fails, or
                there are no candidates
        """
        if not query or not query.strip():
            raise ResolutionError(query or "", ErrorMessages.EMPTY_QUERY)
        try:
            result = await self._client.geocode(query)
        except UpstreamError as e:
            raise ResolutionError(query, str(e)) from e

        if result.is_empty:
            raise ResolutionError(query, ErrorMessages.NO_RESULTS.format(query))

        head = result.candidates[0]
        resolved = ResolvedAddress(
            query=query,
            resolved=head.display_address,
            coordinate=head.coordinate,
            source=result.source,
        )
        logger.info(
            "Resolved %r to %s (%s, %s) [%s]",
            query,
            resolved.resolved,
            resolved.coordinate.latitude,
            resolved.coordinate.longitude,
            resolved.source.value,
        )
        return resolved
