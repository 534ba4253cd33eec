"""Item counter API routes."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from itemcounter import __version__
from itemcounter.counting.schemas import (
    ApiInfo,
    ApiResponse,
    CountRequest,
    CountResponse,
    HealthStatus,
    RequestExample,
)
from itemcounter.counting.service import CountingService

router = APIRouter(prefix="/api/itemcounter", tags=["itemcounter"])


def get_counting_service() -> CountingService:
    """Dependency placeholder, overridden at startup."""
    raise RuntimeError("CountingService not configured")


@router.get("")
async def get_info(
    service: CountingService = Depends(get_counting_service),
) -> ApiResponse[ApiInfo]:
    """API information and supported data types."""
    info = ApiInfo(
        name="Item Counter API",
        version=__version__,
        description="API for counting occurrences of items across multiple data types",
        supported_data_types=service.supported_data_types(),
        examples={
            "text": RequestExample(items=["apple", "banana", "apple"], data_type="text"),
            "integer": RequestExample(items=["1", "2", "1", "3"], data_type="integer"),
            "boolean": RequestExample(items=["true", "false", "yes", "no"], data_type="boolean"),
        },
    )
    return ApiResponse[ApiInfo](
        success=True,
        message="Item Counter API is running successfully.",
        data=info,
    )


@router.post("/count", response_model=ApiResponse[CountResponse])
async def count_items(
    request: CountRequest,
    service: CountingService = Depends(get_counting_service),
) -> ApiResponse[CountResponse] | JSONResponse:
    """Count occurrences of items in a list. Any invalid item rejects the whole batch."""
    result = service.count_items(request)
    if not result.success:
        body = ApiResponse[CountResponse](success=False, message=result.message, data=result)
        return JSONResponse(status_code=400, content=body.model_dump(mode="json"))

    return ApiResponse[CountResponse](
        success=True,
        message="Items counted successfully.",
        data=result,
    )


@router.get("/datatypes")
async def get_supported_data_types(
    service: CountingService = Depends(get_counting_service),
) -> ApiResponse[list[str]]:
    return ApiResponse[list[str]](
        success=True,
        message="Supported data types retrieved successfully.",
        data=service.supported_data_types(),
    )


@router.get("/health")
async def health_check() -> ApiResponse[HealthStatus]:
    return ApiResponse[HealthStatus](
        success=True,
        message="API is healthy and running.",
        data=HealthStatus(status="Healthy", uptime=datetime.now(UTC)),
    )
