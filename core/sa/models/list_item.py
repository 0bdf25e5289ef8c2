# core/sa/models/list_item.py
from datetime import datetime, UTC
from sqlalchemy import String, Integer, Text, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from core.models.list_item import UNRATED
from .base import Base, TimestampMixin, UTCDateTime

class ListItem(Base, TimestampMixin):
    __tablename__ = 'list_item'

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    owner_id: Mapped[str] = mapped_column(ForeignKey('user.id'), nullable=False)
    # Not a foreign key: a list item outlives the book it points to
    book_id: Mapped[str] = mapped_column(String(32), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=UNRATED)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    start_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=lambda: datetime.now(UTC))
    finish_date: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    # Relationships
    owner = relationship('User', back_populates='list_items')

    __table_args__ = (
        UniqueConstraint('owner_id', 'book_id', name='uix_list_item_owner_book'),
        Index('idx_list_item_owner_id', 'owner_id'),
    )
