"""Database models."""

from atelier.models.artwork import Artwork, Piece, PieceImage, PieceNote
from atelier.models.contact import Collector, Newsletter, Reminder
from atelier.models.material import Material
from atelier.models.open_call import CustomOpenCall, SavedCallState
from atelier.models.session import Session
from atelier.models.user import User

__all__ = [
    "User",
    "Session",
    "Artwork",
    "Piece",
    "PieceNote",
    "PieceImage",
    "Collector",
    "Reminder",
    "Newsletter",
    "Material",
    "SavedCallState",
    "CustomOpenCall",
]
