from .Base import Base
from .User import User, UserCreate, UserLogin, UserTimezone
from .UserDB import UserDB
from .Friend import Friend, FriendRequest
from .FriendDB import FriendDB
from .Event import ConvertedEvent, Event, EventCreate
from .EventDB import EventDB
from .Call import CallProposal, CallProposals, CallRequest
