"""검색 기록 API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, Request, Response
from pydantic import BaseModel

from odyssey.presentation.web.serializers import history_json

router = APIRouter(tags=["search-history"])


class SaveHistoryRequest(BaseModel):
    query: str
    type: str = "location"


def _use_case(request: Request):
    return request.app.state.container.search_history_use_case()


@router.get("/users/{user_id}/search-history")
async def list_history(request: Request, user_id: str, limit: Annotated[int, Query(ge=1)] = 10):
    items = await _use_case(request).recent(user_id, limit)
    return [history_json(item) for item in items]


@router.post("/users/{user_id}/search-history", status_code=201)
async def save_history(request: Request, user_id: str, body: SaveHistoryRequest):
    item = await _use_case(request).save(user_id, body.query, body.type)
    return history_json(item)


@router.delete("/users/{user_id}/search-history")
async def clear_history(request: Request, user_id: str):
    deleted = await _use_case(request).clear(user_id)
    return {"deleted": deleted}


@router.delete("/search-history/{item_id}", status_code=204)
async def delete_history_item(request: Request, item_id: str):
    await _use_case(request).delete(item_id)
    return Response(status_code=204)
