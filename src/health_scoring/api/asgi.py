"""ASGI entrypoint for the health scoring API."""

from health_scoring.api.app import create_app
from health_scoring.containers import build_container

app = create_app(build_container())
