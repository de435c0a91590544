from sqlalchemy import Column, ForeignKey, Integer, String, DateTime
from sqlalchemy.orm import relationship

from models.Base import Base

class EventDB(Base):
    __tablename__ = "schedule"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True)
    title = Column(String)
    start_time = Column(DateTime)
    end_time = Column(DateTime)

    user = relationship("UserDB", back_populates="events")
