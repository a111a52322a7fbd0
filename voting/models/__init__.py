from voting.models.base import Base
from voting.models.vote import Vote

__all__ = [
    "Base",
    "Vote",
]
