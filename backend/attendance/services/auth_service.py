"""Administrator accounts and the logged-in dependency."""
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from attendance.database import get_db
from attendance.models.user import AdminUser

logger = logging.getLogger(__name__)

SESSION_KEY = "admin_user_id"


def create_admin(db: Session, email: str, password: str) -> AdminUser:
    email = email.strip().lower()
    if db.query(AdminUser).filter(AdminUser.email == email).first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Administrator already exists")
    admin = AdminUser(email=email, password_hash=generate_password_hash(password))
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Created administrator %s", email)
    return admin


def authenticate(db: Session, email: str, password: str) -> Optional[AdminUser]:
    admin = db.query(AdminUser).filter(AdminUser.email == email.strip().lower()).first()
    if not admin or not check_password_hash(admin.password_hash, password):
        logger.info("Failed login for %s", email)
        return None
    return admin


def get_current_admin(request: Request, db: Session = Depends(get_db)) -> AdminUser:
    """Dependency guarding the back office; 401 unless an admin is logged in."""
    user_id = request.session.get(SESSION_KEY)
    admin = db.query(AdminUser).filter(AdminUser.user_id == user_id).first() if user_id else None
    if not admin:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return admin
