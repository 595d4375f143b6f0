"""Administrator login routes (signed session cookie)."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from attendance.database import get_db
from attendance.models.user import AdminUser
from attendance.schemas.auth import AdminOut, LoginRequest
from attendance.services import auth_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=AdminOut)
def login(payload: LoginRequest, request: Request, db: Session = Depends(get_db)):
    admin = auth_service.authenticate(db, payload.email, payload.password)
    if not admin:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    request.session[auth_service.SESSION_KEY] = admin.user_id
    logger.info("Administrator %s logged in", admin.email)
    return admin


@router.post("/logout")
def logout(request: Request):
    request.session.clear()
    return {"status": "ok"}


@router.get("/me", response_model=AdminOut)
def me(admin: AdminUser = Depends(auth_service.get_current_admin)):
    return admin
