import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database import get_db
from helper import are_friends, get_events, get_user_or_404
from models import *
from timezone_conversion import convert_time

logger = logging.getLogger(__name__)

friend_router = APIRouter(
    tags=["Friend"]
)

@friend_router.post("/add-friend", tags=["Friend"])
def add_friend(request: FriendRequest, db: Session = Depends(get_db)):
    """
    Adds a friendship between a user and another user found by username.

    The friendship is stored in both directions.

    Args:
        request (FriendRequest): The requesting user's ID and the friend's username.

    Returns:
        dict: A success message.
    """
    try:
        get_user_or_404(request.user_id, db)

        friend = db.query(UserDB).filter(UserDB.username == request.friend_username).first()
        if not friend:
            raise HTTPException(status_code=404, detail="User not found")
        if friend.id == request.user_id:
            raise HTTPException(status_code=400, detail="You cannot add yourself as a friend")
        if are_friends(request.user_id, friend.id, db) or are_friends(friend.id, request.user_id, db):
            raise HTTPException(status_code=400, detail="You are already friends")

        db.add(FriendDB(user_id=request.user_id, friend_id=friend.id))
        db.add(FriendDB(user_id=friend.id, friend_id=request.user_id))
        db.commit()
        return {"message": "Friend added successfully"}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Adding friend %s for user %s failed", request.friend_username, request.user_id)
        raise HTTPException(status_code=500, detail=str(e))

@friend_router.get("/friends/{user_id}", response_model=list[Friend], tags=["Friend"])
def get_friends(user_id: int, db: Session = Depends(get_db)):
    """
    Lists the friends of a user.

    Args:
        user_id (int): The user ID.

    Returns:
        list: Friends with their ID and username.
    """
    try:
        return db.query(UserDB).join(FriendDB, FriendDB.friend_id == UserDB.id).filter(
            FriendDB.user_id == user_id
        ).order_by(UserDB.username.asc()).all()
    except Exception as e:
        logger.exception("Fetching friends of user %s failed", user_id)
        raise HTTPException(status_code=500, detail=str(e))

@friend_router.get("/friends/{user_id}/calendar/{friend_id}", tags=["Friend"])
def get_friend_calendar(user_id: int, friend_id: int, db: Session = Depends(get_db)):
    """
    Returns a friend's events relabelled into the user's time zone.

    Events are stored in UTC. Each event carries a ``converted`` flag that is
    false when the conversion service failed and the UTC time was kept.

    Args:
        user_id (int): The viewing user.
        friend_id (int): The friend whose calendar is shown.

    Returns:
        dict: Both time zones and the converted events.
    """
    try:
        user = get_user_or_404(user_id, db)
        friend = get_user_or_404(friend_id, db)
        if not are_friends(user_id, friend_id, db):
            raise HTTPException(status_code=404, detail="Friend not found")

        events = []
        for event in get_events(friend_id, db):
            start = convert_time(event.start_time, "UTC", user.timezone)
            end = convert_time(event.end_time, "UTC", user.timezone)
            events.append(ConvertedEvent(
                title=event.title,
                start=start.instant,
                end=end.instant,
                converted=start.converted and end.converted
            ))

        return {
            "timezone": user.timezone,
            "friend_timezone": friend.timezone,
            "events": events
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Fetching calendar of friend %s for user %s failed", friend_id, user_id)
        raise HTTPException(status_code=500, detail=str(e))
