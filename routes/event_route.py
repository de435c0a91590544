import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from helper import get_events, get_user_or_404
from models import *

logger = logging.getLogger(__name__)

event_router = APIRouter(
    tags=["Event"]
)

@event_router.post("/add-event", response_model=Event, status_code=status.HTTP_201_CREATED, tags=["Event"])
def add_event(event: EventCreate, db: Session = Depends(get_db)):
    """
    Adds an event to a user's schedule.

    Args:
        event (EventCreate): Owner, title and UTC start/end of the event.

    Returns:
        Event: The stored event.
    """
    try:
        get_user_or_404(event.user_id, db)

        db_event = EventDB(**event.model_dump())
        db.add(db_event)
        db.commit()
        db.refresh(db_event)
        return db_event
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Adding event for user %s failed", event.user_id)
        raise HTTPException(status_code=500, detail=str(e))

@event_router.get("/schedule/{user_id}", response_model=list[Event], tags=["Event"])
def get_schedule(user_id: int, db: Session = Depends(get_db)):
    """
    Retrieves a user's events ordered by start time.

    Args:
        user_id (int): The user ID.

    Returns:
        list: The user's events.
    """
    try:
        return get_events(user_id, db)
    except Exception as e:
        logger.exception("Fetching schedule of user %s failed", user_id)
        raise HTTPException(status_code=500, detail=str(e))

@event_router.delete("/event/{id}", tags=["Event"])
def delete_event(id: int, db: Session = Depends(get_db)):
    """
    Deletes an event by its ID.

    Args:
        id (int): The event ID.

    Returns:
        dict: A success flag if deletion was successful.
    """
    try:
        db_event = db.query(EventDB).filter(EventDB.id == id).first()
        if not db_event:
            raise HTTPException(status_code=404, detail="Event not found")

        db.delete(db_event)
        db.commit()
        return {"success": True}
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Deleting event %s failed", id)
        raise HTTPException(status_code=500, detail=str(e))
