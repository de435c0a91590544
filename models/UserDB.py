from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from models.Base import Base

class UserDB(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    timezone = Column(String, nullable=False)

    events = relationship("EventDB", back_populates="user", cascade="all, delete-orphan")
