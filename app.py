import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from routes.call_route import call_router
from routes.event_route import event_router
from routes.friend_route import friend_router
from routes.user_route import user_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(title="SchedYouLater")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(user_router)
app.include_router(friend_router)
app.include_router(event_router)
app.include_router(call_router)

@app.get("/")
async def base_path():
    """
    Root endpoint to verify that the API is running.

    Returns:
        dict: A success message.
    """
    return {"success": True}
