import logging
from datetime import timedelta
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database import get_db
from helper import get_user_or_404, load_busy_intervals
from models import *
from scheduling import Interval, SchedulingError, resolve_optimal_times

logger = logging.getLogger(__name__)

call_router = APIRouter(
    tags=["Call"]
)

@call_router.post("/optimal-time", response_model=CallProposals, tags=["Call"])
def find_optimal_time(request: CallRequest, db: Session = Depends(get_db)):
    """
    Proposes up to five call times that are free for a user and a friend.

    Without an explicit window, today's default call window is searched.
    The result is never empty: if no shared slot exists, one fallback
    proposal at the start of the window is returned.

    Args:
        request (CallRequest): Both user IDs, the duration in minutes and an optional window.

    Returns:
        CallProposals: The friend's time zone and the proposed start/end times.
    """
    try:
        get_user_or_404(request.user_id, db)
        friend = get_user_or_404(request.friend_id, db)

        window = None
        if request.window_start is not None:
            window = Interval(start=request.window_start, end=request.window_end)

        proposals = resolve_optimal_times(
            load_busy_intervals(request.user_id, db),
            load_busy_intervals(request.friend_id, db),
            timedelta(minutes=request.duration),
            window=window
        )

        return {
            "friend_timezone": friend.timezone,
            "proposals": [{"start": p.start, "end": p.end} for p in proposals]
        }
    except HTTPException:
        raise
    except SchedulingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OverflowError:
        raise HTTPException(status_code=400, detail="Call does not fit into the supported date range")
    except Exception as e:
        logger.exception("Finding call time for users %s and %s failed", request.user_id, request.friend_id)
        raise HTTPException(status_code=500, detail=str(e))
