"""Booking endpoints and the booking confirmation page."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from class_booking.api.models import ErrorOut
from class_booking.api.templating import templates
from class_booking.domain.dates import format_iso_date

if TYPE_CHECKING:
    from class_booking.containers import AppContainer

router = APIRouter(tags=["bookings"])


@router.post(
    "/bookings",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorOut},
        status.HTTP_404_NOT_FOUND: {"model": ErrorOut},
    },
)
async def create_booking(
    request: Request,
    class_id: str = Form(default=""),
    name: str = Form(default=""),
    date: str = Form(default=""),
) -> RedirectResponse:
    """Book a class from form input and redirect to the confirmation page."""
    container: AppContainer = request.app.state.container
    record = container.booking_service.create_booking(
        class_id=class_id, name=name, date=date
    )
    query = urlencode(
        {
            "class_id": record.class_id,
            "name": record.name,
            "date": format_iso_date(record.date),
        }
    )
    return RedirectResponse(
        f"/create-booking-response?{query}", status_code=status.HTTP_302_FOUND
    )


@router.get("/create-booking-response", response_class=HTMLResponse)
async def create_booking_response(
    request: Request, class_id: str = "", name: str = "", date: str = ""
) -> HTMLResponse:
    """Show the booking that was just created."""
    return templates.TemplateResponse(
        request,
        "booking_created.html",
        {"class_id": class_id, "name": name, "date": date},
    )
