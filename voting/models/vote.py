from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from voting.models.base import Base


class Vote(Base):
    __tablename__ = "votes"

    id: Mapped[int] = mapped_column(primary_key=True)
    option: Mapped[str] = mapped_column(String(255))
    voted_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.current_timestamp())
