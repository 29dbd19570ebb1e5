"""
➡️ But : Définir les endpoints de la checklist.

Réceptionne les requêtes HTTP, appelle ChecklistService, retourne les schémas de sortie.

Les routes ne contiennent ni SQL ni logique métier.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.api.v1.dependencies import get_checklist_service, get_current_user
from app.core.errors import ChecklistError, ConflictError, ConnectivityError, NotFoundError
from app.db.models.users import User
from app.features.checklist.schemas import ChecklistOut, CompletionIn, TaskItem
from app.features.checklist.services import ChecklistService, compute_progress

router = APIRouter(
    prefix="/checklist",
    tags=["checklist"],
    responses={404: {"description": "Not Found"}},
)

def _raise_http(e: ChecklistError):
    if isinstance(e, NotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    if isinstance(e, ConflictError):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)

# -----------------------------
# List
# -----------------------------
@router.get(
    "",
    summary="Ma checklist",
    description="Titres et tâches triés par ordre d'affichage, avec la progression.",
    response_model=ChecklistOut,
    responses={
        200: {
            "description": "Checklist de l'utilisateur courant",
            "content": {
                "application/json": {
                    "example": {
                        "items": [
                            {"kind": "heading", "id": 1, "text": "Phase 1: Preparation", "sequence_index": 0},
                            {"kind": "task", "id": 2, "text": "List your questions", "completed": True, "sequence_index": 1},
                        ],
                        "progress": {"percentage": 100, "completed": 1, "total": 1, "all_complete": True},
                    }
                }
            },
        }
    },
)
def get_checklist(
    user: User = Depends(get_current_user),
    svc: ChecklistService = Depends(get_checklist_service),
):
    try:
        items = svc.list_items(user.id)
    except ConnectivityError as e:
        _raise_http(e)
    return ChecklistOut(items=items, progress=compute_progress(items))

# -----------------------------
# Toggle
# -----------------------------
@router.post(
    "/{item_id}/toggle",
    summary="Inverser l'état d'une tâche",
    response_model=TaskItem,
    responses={409: {"description": "Les titres ne se cochent pas"}},
)
def toggle_item(
    item_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    svc: ChecklistService = Depends(get_checklist_service),
):
    try:
        return svc.toggle(user.id, item_id)
    except (NotFoundError, ConflictError, ConnectivityError) as e:
        _raise_http(e)

# -----------------------------
# Set
# -----------------------------
@router.put(
    "/{item_id}",
    summary="Définir l'état d'une tâche",
    response_model=TaskItem,
    responses={409: {"description": "Les titres ne se cochent pas"}},
)
def set_item(
    payload: CompletionIn,
    item_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    svc: ChecklistService = Depends(get_checklist_service),
):
    try:
        return svc.set_completed(user.id, item_id, payload.completed)
    except (NotFoundError, ConflictError, ConnectivityError) as e:
        _raise_http(e)
