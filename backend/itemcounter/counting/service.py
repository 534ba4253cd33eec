"""Counting service: runs the engine for API requests and shapes the response."""

import logging

from itemcounter.counting.engine import count, supported_kinds
from itemcounter.counting.errors import UnsupportedKind
from itemcounter.counting.schemas import CountRequest, CountResponse

logger = logging.getLogger(__name__)


class CountingService:
    """Stateless adapter between the HTTP layer and the counting engine."""

    def supported_data_types(self) -> list[str]:
        return supported_kinds()

    def count_items(self, request: CountRequest) -> CountResponse:
        """Count request.items as request.data_type.

        Every engine failure becomes a non-success response carrying the
        engine's message; nothing is raised to the caller.
        """
        result = count(request.items, request.data_type)

        if result.error is not None:
            logger.warning(
                "Count rejected (data_type=%s, items=%d): %s",
                request.data_type, len(request.items), result.error.message,
            )
            return CountResponse(
                success=False,
                message=result.error.message,
                supported_data_types=(
                    list(result.error.supported)
                    if isinstance(result.error, UnsupportedKind)
                    else None
                ),
            )

        logger.info(
            "Counted %d items as %s: %d distinct",
            len(request.items), result.kind.value, len(result.table),
        )
        return CountResponse(
            success=True,
            message="Items counted successfully.",
            counts=result.table,
            data_type=request.data_type,
            total_items=len(request.items),
        )
