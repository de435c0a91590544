import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

import config
from database import get_db
from helper import get_user_or_404
from models import *

logger = logging.getLogger(__name__)

user_router = APIRouter(
    tags=["User"]
)

@user_router.get("/timezones", tags=["User"])
def get_timezones():
    """
    Lists the time zones offered at registration.

    Returns:
        list: IANA time zone names.
    """
    return config.SUPPORTED_TIMEZONES

@user_router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED, tags=["User"])
def register_user(user: UserCreate, db: Session = Depends(get_db)):
    """
    Registers a new user with a home time zone.

    Args:
        user (UserCreate): Username, password and IANA time zone.

    Returns:
        User: The created user.
    """
    try:
        db_user = db.query(UserDB).filter(UserDB.username == user.username).first()
        if db_user:
            raise HTTPException(status_code=400, detail="Username already exists")

        new_user = UserDB(username=user.username, password=user.password, timezone=user.timezone)
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
        logger.info("Registered user %s", new_user.username)
        return new_user
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Registering %s failed", user.username)
        raise HTTPException(status_code=500, detail=str(e))

@user_router.post("/login", response_model=User, tags=["User"])
def login_user(credentials: UserLogin, db: Session = Depends(get_db)):
    """
    Checks the credentials and returns the matching user.

    Args:
        credentials (UserLogin): Username and password.

    Returns:
        User: The logged in user.
    """
    try:
        user = db.query(UserDB).filter(
            UserDB.username == credentials.username,
            UserDB.password == credentials.password
        ).first()
        if not user:
            raise HTTPException(status_code=400, detail="Invalid credentials")
        return user
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Login for %s failed", credentials.username)
        raise HTTPException(status_code=500, detail=str(e))

@user_router.get("/user/{id}", response_model=UserTimezone, tags=["User"])
def get_user_timezone(id: int, db: Session = Depends(get_db)):
    """
    Returns the home time zone of a user.

    Args:
        id (int): The user ID.

    Returns:
        dict: The user's time zone.
    """
    try:
        return {"timezone": get_user_or_404(id, db).timezone}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Fetching user %s failed", id)
        raise HTTPException(status_code=500, detail=str(e))
