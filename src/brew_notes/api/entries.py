"""Journal entry, stats and export endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException, Request, Response, status

from brew_notes.api.schemas import (
    DrinkTypeView,
    EntryList,
    EntryPayload,
    EntryView,
    StatsView,
    TagPayload,
)
from brew_notes.domain.entries import DrinkType, share_text
from brew_notes.services.export import export_csv
from brew_notes.services.filters import filter_entries

if TYPE_CHECKING:
    from brew_notes.containers import AppContainer

router = APIRouter(tags=["entries"])

EXPORT_FILENAME = "brew-notes-export.csv"


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/entries")
async def list_entries(
    request: Request, drink_type: DrinkType | None = None, q: str = ""
) -> EntryList:
    """Return entries, newest first, filtered by drink type and search text."""
    entries = _container(request).entry_service.all()
    visible = filter_entries(entries, drink_type=drink_type, query=q)
    return EntryList(
        revision=request.app.state.revision,
        entries=[EntryView.from_entry(entry) for entry in visible],
    )


@router.get("/entries/recent")
async def recent_entries(request: Request) -> list[EntryView]:
    """Return the most recent entries for the home screen."""
    container = _container(request)
    entries = container.entry_service.recent(container.settings.recent_limit)
    return [EntryView.from_entry(entry) for entry in entries]


@router.post("/entries", status_code=status.HTTP_201_CREATED)
async def create_entry(payload: EntryPayload, request: Request) -> EntryView:
    """Log a new drink."""
    entry = _container(request).entry_service.create(payload.to_draft())
    return EntryView.from_entry(entry)


@router.delete("/entries", status_code=status.HTTP_200_OK)
async def clear_entries(request: Request, confirm: bool = False) -> dict[str, int]:
    """Delete every entry. Requires ``confirm=true``."""
    if not confirm:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Clearing all data requires confirm=true",
        )
    removed = _container(request).entry_service.delete_all()
    return {"removed": removed}


@router.get("/entries/{entry_id}")
async def get_entry(entry_id: UUID, request: Request) -> EntryView:
    """Return a single entry."""
    return EntryView.from_entry(_container(request).entry_service.get(entry_id))


@router.put("/entries/{entry_id}")
async def update_entry(
    entry_id: UUID, payload: EntryPayload, request: Request
) -> EntryView:
    """Replace every editable field of an entry."""
    entry = _container(request).entry_service.update(entry_id, payload.to_draft())
    return EntryView.from_entry(entry)


@router.delete("/entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: UUID, request: Request) -> Response:
    """Delete an entry."""
    _container(request).entry_service.delete(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/entries/{entry_id}/photo")
async def entry_photo(entry_id: UUID, request: Request) -> Response:
    """Return the stored photo bytes."""
    entry = _container(request).entry_service.get(entry_id)
    if entry.photo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(content=entry.photo, media_type="application/octet-stream")


@router.post("/entries/{entry_id}/tags")
async def add_entry_tag(
    entry_id: UUID, payload: TagPayload, request: Request
) -> EntryView:
    """Attach a tag to an entry."""
    entry = _container(request).entry_service.tag_entry(entry_id, payload.tag)
    return EntryView.from_entry(entry)


@router.delete("/entries/{entry_id}/tags/{tag}")
async def remove_entry_tag(entry_id: UUID, tag: str, request: Request) -> EntryView:
    """Detach a tag from an entry."""
    entry = _container(request).entry_service.untag_entry(entry_id, tag)
    return EntryView.from_entry(entry)


@router.get("/entries/{entry_id}/share")
async def entry_share_text(entry_id: UUID, request: Request) -> dict[str, str]:
    """Return the share text for an entry."""
    entry = _container(request).entry_service.get(entry_id)
    return {"text": share_text(entry)}


@router.get("/stats")
async def stats(request: Request) -> StatsView:
    """Return journal statistics."""
    return StatsView.from_stats(_container(request).stats_service.get_summary())


@router.get("/export.csv")
async def export(request: Request) -> Response:
    """Download every entry as CSV."""
    container = _container(request)
    content = export_csv(
        container.entry_service.all(), ZoneInfo(container.settings.timezone)
    )
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.get("/drink-types")
async def drink_types() -> list[DrinkTypeView]:
    """Return drink types with suggested specific drinks."""
    return [
        DrinkTypeView(value=kind, emoji=kind.emoji, sub_types=list(kind.sub_types))
        for kind in DrinkType
    ]
