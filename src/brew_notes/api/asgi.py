"""ASGI entrypoint for the Brew Notes API."""

from brew_notes.api.app import create_app
from brew_notes.containers import build_container

app = create_app(build_container())
