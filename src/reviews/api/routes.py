"""FastAPI routes for the Reviews service.

Each route translates between Pydantic schemas (external contract) and
use-case commands (internal domain concepts), then maps the tagged result
onto a status code.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from reviews.api.schemas import (
    AddReviewRequest,
    ErrorResponse,
    ReviewListResponse,
    ReviewResponse,
    ReviewSchema,
)
from reviews.container import ReviewServices
from reviews.review.listing import ListReviews
from reviews.review.results import ErrorKind, Failure
from reviews.review.submission import AddReview

review_router = APIRouter(prefix="/reviews", tags=["reviews"])

_STATUS_FOR_KIND = {
    ErrorKind.VALIDATION_FAILED: 400,
    ErrorKind.CONFLICT_EXISTS: 409,
    ErrorKind.STORAGE_UNAVAILABLE: 503,
}


def get_services(request: Request) -> ReviewServices:
    return request.app.state.services


def _failure_response(failure: Failure) -> JSONResponse:
    body = ErrorResponse(errors=list(failure.errors), kind=failure.kind.value)
    return JSONResponse(status_code=_STATUS_FOR_KIND[failure.kind], content=body.model_dump(by_alias=True))


@review_router.post(
    "",
    status_code=201,
    response_model=ReviewResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def add_review(body: AddReviewRequest, services: ReviewServices = Depends(get_services)):
    """Submit a new review."""
    command = AddReview(rating=body.rating, title=body.title, comment=body.comment)
    result = await services.add_review(command)
    if not result.success:
        return _failure_response(result)
    return ReviewResponse(review=ReviewSchema.from_review(result.review))


@review_router.get("", response_model=ReviewListResponse, responses={503: {"model": ErrorResponse}})
async def list_reviews(services: ReviewServices = Depends(get_services)):
    """List every stored review."""
    result = await services.list_reviews(ListReviews())
    if not result.success:
        return _failure_response(result)
    return ReviewListResponse(
        reviews=[ReviewSchema.from_review(review) for review in result.reviews],
        total_count=result.total_count,
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies in the same shape as domain validation failures."""
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        errors.append(f"{location}: {error['msg']}" if location else error["msg"])
    body = ErrorResponse(errors=errors, kind=ErrorKind.VALIDATION_FAILED.value)
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


def register_exception_handlers(app) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
