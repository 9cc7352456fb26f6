"""ASGI entrypoint for the class booking API."""

from class_booking.api.app import create_app
from class_booking.containers import build_container

app = create_app(build_container())
