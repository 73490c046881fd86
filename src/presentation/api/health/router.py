"""
Health Router - Endpoints de sante.

Endpoints:
----------
- GET /health: Le serveur repond
- GET /health/email: Le serveur SMTP accepte connexion + auth
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.infrastructure.email.service import NotificationMailer
from src.presentation.api.dependencies import get_mailer
from src.presentation.api.health.schemas import EmailHealthResponse, HealthResponse

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
def health():
    """Endpoint de sante."""
    return HealthResponse(status="healthy")


@router.get(
    "/email",
    response_model=EmailHealthResponse,
    responses={503: {"model": EmailHealthResponse}},
)
async def email_health(mailer: NotificationMailer = Depends(get_mailer)):
    """
    Verifie le transport SMTP.

    Retourne 503 si le mailer n'est pas configure ou si le serveur
    est injoignable. Ne leve jamais: verify_connection absorbe les erreurs.
    """
    if await mailer.verify_connection():
        return EmailHealthResponse(email="ready", configured=True)

    body = EmailHealthResponse(email="unavailable", configured=mailer.is_configured)
    return JSONResponse(status_code=503, content=body.model_dump())
