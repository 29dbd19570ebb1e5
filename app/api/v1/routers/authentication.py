from fastapi import APIRouter, Depends, HTTPException, status

from app.api.v1.dependencies import get_auth_service, get_current_user
from app.core.errors import AuthError, ConflictError, ConnectivityError, ValidationError
from app.db.models.users import User
from app.features.authentication.services import AuthService
from app.features.authentication.schemas import RegisterIn, LoginIn, SessionOut
from app.features.users.schemas import UserOut

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={404: {"description": "Not Found"}},
)

# -----------------------------
# Register
# -----------------------------
@router.post(
    "/register",
    summary="Créer un compte",
    description="Crée l'utilisateur et sa checklist, puis retourne une session (user + access token).",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionOut,
    responses={
        409: {"description": "Nom d'utilisateur déjà pris"},
        422: {"description": "Saisie invalide"},
        503: {"description": "Base injoignable"},
    },
)
def register(payload: RegisterIn, svc: AuthService = Depends(get_auth_service)):
    try:
        user = svc.register(payload.username, payload.password, payload.confirm_password)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except ConnectivityError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    return svc.issue_session(user)

# -----------------------------
# Login
# -----------------------------
@router.post(
    "/login",
    summary="Se connecter",
    response_model=SessionOut,
    responses={
        401: {"description": "Identifiants invalides"},
        503: {"description": "Base injoignable"},
    },
)
def login(payload: LoginIn, svc: AuthService = Depends(get_auth_service)):
    try:
        user = svc.login(payload.username, payload.password)
    except AuthError as e:
        # Même message que l'utilisateur existe ou non
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except ConnectivityError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    return svc.issue_session(user)

# -----------------------------
# Me (profil courant)
# -----------------------------
@router.get(
    "/me",
    summary="Récupérer l'utilisateur courant",
    response_model=UserOut,
    responses={
        200: {"description": "Utilisateur courant"},
        401: {"description": "Token invalide ou expiré"},
    },
)
def me(user: User = Depends(get_current_user)):
    return user
