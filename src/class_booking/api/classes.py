"""Class endpoints and the class confirmation page."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from class_booking.api.models import BookingOut, ClassOut, ErrorOut
from class_booking.api.templating import templates
from class_booking.domain.errors import ErrorReason, ValidationError

if TYPE_CHECKING:
    from class_booking.containers import AppContainer

router = APIRouter(tags=["classes"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorOut},
    status.HTTP_404_NOT_FOUND: {"model": ErrorOut},
}


@router.post(
    "/classes",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    responses=_ERROR_RESPONSES,
)
async def create_class(
    request: Request,
    name: str = Form(default=""),
    start_date: str = Form(default=""),
    end_date: str = Form(default=""),
    capacity: str = Form(default=""),
) -> RedirectResponse:
    """Create a class from form input and redirect to its confirmation page."""
    container: AppContainer = request.app.state.container
    record = container.class_service.create_class(
        name=name, start_date=start_date, end_date=end_date, capacity=capacity
    )
    query = urlencode({"id": record.id})
    return RedirectResponse(
        f"/create-class-response?{query}", status_code=status.HTTP_302_FOUND
    )


@router.get("/classes/{class_id}", responses=_ERROR_RESPONSES)
async def get_class(class_id: str, request: Request) -> ClassOut:
    """Return a class as JSON."""
    container: AppContainer = request.app.state.container
    return ClassOut.from_record(container.class_service.require_class(class_id))


@router.get("/classes/{class_id}/bookings", responses=_ERROR_RESPONSES)
async def list_class_bookings(class_id: str, request: Request) -> list[BookingOut]:
    """Return the bookings made against a class."""
    container: AppContainer = request.app.state.container
    record = container.class_service.require_class(class_id)
    return [
        BookingOut.from_record(booking)
        for booking in container.booking_service.list_bookings(record.id)
    ]


@router.get(
    "/create-class-response",
    response_class=HTMLResponse,
    responses=_ERROR_RESPONSES,
)
async def create_class_response(
    request: Request,
    id: str = "",  # noqa: A002
) -> HTMLResponse:
    """Show the created class and a form to book it."""
    if not id:
        raise ValidationError(ErrorReason.MISSING_FIELD, "Class ID is missing", "id")
    container: AppContainer = request.app.state.container
    record = container.class_service.require_class(id)
    return templates.TemplateResponse(
        request, "class_created.html", {"course": ClassOut.from_record(record)}
    )
