"""
Broadcast content REST endpoints.

GET /v1/broadcasts/{article_id}/content: joined live-blog feed for a broadcast.
"""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Response

from content.service import BroadcastContentService

from api.dependencies import get_content_service

router = APIRouter(prefix="/v1/broadcasts", tags=["broadcasts"])


@router.get("/{article_id}/content")
async def get_broadcast_content(
    article_id: str,
    response: Response,
    service: BroadcastContentService = Depends(get_content_service),
) -> dict[str, Any]:
    """
    Metadata, info texts, sport results, header order and published comments.

    Parts that failed to load are listed under ``errors``; whatever they
    decoded before failing is still served. A broadcast that does not exist
    yields empty parts, not a 404.
    """
    load = await service.load(article_id)

    payload = load.content.to_wire()
    payload["errors"] = [
        {"part": e.part, "kind": e.kind, "message": str(e)} for e in load.errors
    ]
    response.headers["Cache-Control"] = "no-store"
    return payload
