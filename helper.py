from fastapi import HTTPException
from sqlalchemy.orm import Session
from typing import List

from models import EventDB, FriendDB, UserDB
from scheduling import Interval


def get_user_or_404(user_id: int, db: Session) -> UserDB:
    user = db.query(UserDB).filter(UserDB.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

def are_friends(user_id: int, friend_id: int, db: Session) -> bool:
    return db.query(FriendDB).filter(
        FriendDB.user_id == user_id,
        FriendDB.friend_id == friend_id
    ).first() is not None

def get_events(user_id: int, db: Session) -> List[EventDB]:
    return db.query(EventDB).filter(EventDB.user_id == user_id).order_by(EventDB.start_time.asc()).all()

def load_busy_intervals(user_id: int, db: Session) -> List[Interval]:
    """
    Materializes the stored events of a user as busy intervals.

    Args:
        user_id (int): Owner of the events.
        db (Session): Open database session.

    Returns:
        list: Intervals ordered by start time.
    """
    return [Interval.from_event(event.start_time, event.end_time) for event in get_events(user_id, db)]
