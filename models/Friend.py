from pydantic import BaseModel

class FriendRequest(BaseModel):
    user_id: int
    friend_username: str

class Friend(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True
