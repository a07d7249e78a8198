"""Ticket ORM model. Support request raised by a user and handled by an expert."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.domain.enums import TicketState
from app.infrastructure.persistence.database import Base


class Ticket(Base):
    """Support ticket. Table: ticket."""

    __tablename__ = "ticket"

    ticket_id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    status: Mapped[int] = mapped_column(
        Integer, nullable=False, default=TicketState.OPEN, server_default="0"
    )
    title: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_created: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=True
    )
    requester_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    requester_user_principal_name: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    assigned_to_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    assigned_to_object_id: Mapped[str | None] = mapped_column(
        String(64), nullable=True
    )
    date_assigned: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    date_closed: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    last_modified_by_name: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    last_modified_on: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=True,
    )

    __table_args__ = (
        Index("ix_ticket_status_assignee", "status", "assigned_to_object_id"),
        Index("ix_ticket_last_modified_on", "last_modified_on"),
    )
