"""Portal routes: card grid, filter/skill API, detail view, CSV export.

Handlers are async so every read and mutation of the shared view runs to
completion on the event loop before the next request touches it.
"""

from fastapi import APIRouter, Body, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel

from candidate_portal.export.csv_export import render_csv
from candidate_portal.view import ViewSynchronizer

router = APIRouter()

SUGGESTION_LIMIT = 20


class SkillRequest(BaseModel):
    skill: str


def _view(request: Request) -> ViewSynchronizer:
    return request.app.state.view


def _view_payload(view: ViewSynchronizer) -> dict:
    return {
        "count": len(view.current),
        "total": len(view.store),
        "selection": view.selection.to_display_list(),
        "params": view.params.to_dict(),
        "records": [record.to_dict() for record in view.current],
    }


@router.get("/")
async def index(request: Request):
    view = _view(request)
    return request.app.state.templates.TemplateResponse("index.html", {
        "request": request,
        "records": view.current,
        "count": len(view.current),
        "selection": view.selection.to_display_list(),
        "params": view.params,
        "degrees": view.store.ug_degrees,
    })


@router.get("/candidates/{record_id}")
async def candidate_detail(request: Request, record_id: int):
    record = _view(request).detail(record_id)
    if record is None:
        return request.app.state.templates.TemplateResponse(
            "not_found.html", {"request": request, "record_id": record_id}, status_code=404,
        )
    return request.app.state.templates.TemplateResponse("detail.html", {
        "request": request,
        "record": record,
    })


@router.get("/api/candidates")
async def list_candidates(request: Request):
    return _view_payload(_view(request))


@router.get("/api/candidates/{record_id}")
async def get_candidate(request: Request, record_id: int):
    record = _view(request).detail(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Candidate {record_id} not found")
    return record.to_dict()


@router.post("/api/filters")
async def update_filters(request: Request, payload: dict = Body(...)):
    view = _view(request)
    try:
        view.update_params(**payload)
    except TypeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _view_payload(view)


@router.get("/api/skills/suggest")
async def suggest_skills(request: Request, q: str = ""):
    return {"query": q, "suggestions": _view(request).suggest(q, limit=SUGGESTION_LIMIT)}


@router.post("/api/skills/add")
async def add_skill(request: Request, body: SkillRequest):
    view = _view(request)
    view.add_skill(body.skill)
    return _view_payload(view)


@router.post("/api/skills/remove")
async def remove_skill(request: Request, body: SkillRequest):
    view = _view(request)
    view.remove_skill(body.skill)
    return _view_payload(view)


@router.post("/api/reset")
async def reset_filters(request: Request):
    view = _view(request)
    view.reset()
    return _view_payload(view)


@router.get("/export.csv")
async def export_csv(request: Request):
    view = _view(request)
    if view.store.is_empty:
        return Response(status_code=204)

    filename = request.app.state.config.export.filename
    return Response(
        content=render_csv(view.store.records),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
