"""Preferences endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from brew_notes.api.schemas import PreferencesUpdate, PreferencesView

if TYPE_CHECKING:
    from brew_notes.containers import AppContainer

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("")
async def get_preferences(request: Request) -> PreferencesView:
    """Return the owner's preferences."""
    container: AppContainer = request.app.state.container
    return PreferencesView.from_preferences(container.preferences_service.get())


@router.put("")
async def update_preferences(
    payload: PreferencesUpdate, request: Request
) -> PreferencesView:
    """Update the provided preference fields."""
    container: AppContainer = request.app.state.container
    changes = payload.model_dump(exclude_none=True)
    updated = container.preferences_service.update(**changes)
    return PreferencesView.from_preferences(updated)
