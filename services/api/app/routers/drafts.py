from fastapi import APIRouter, Depends, Request, Response

from app.errors import DraftNotFound
from app.models import CreateDraftRequest, Draft, DraftView, UpdateDraftRequest
from app.storage import DraftStore, format_relative_time

router = APIRouter()


def get_drafts(request: Request) -> DraftStore:
    return request.app.state.drafts


@router.get("/drafts", response_model=list[DraftView], response_model_exclude_none=True)
def list_drafts(store: DraftStore = Depends(get_drafts)):
    now = store.clock()
    return [
        DraftView(**d.model_dump(), updated_label=format_relative_time(d.updated_at, now=now))
        for d in store.list()
    ]


@router.post("/drafts", status_code=201, response_model=Draft, response_model_exclude_none=True)
def create_draft(payload: CreateDraftRequest, store: DraftStore = Depends(get_drafts)):
    return store.create(payload.content, payload.output_format, summary=payload.summary)


@router.patch("/drafts/{draft_id}", response_model=Draft, response_model_exclude_none=True)
def update_draft(draft_id: str, payload: UpdateDraftRequest, store: DraftStore = Depends(get_drafts)):
    if not store.update(draft_id, **payload.model_dump(exclude_unset=True)):
        raise DraftNotFound("Draft not found.")
    return store.get(draft_id)


@router.delete("/drafts/{draft_id}", status_code=204)
def delete_draft(draft_id: str, store: DraftStore = Depends(get_drafts)):
    if not store.delete(draft_id):
        raise DraftNotFound("Draft not found.")
    return Response(status_code=204)
