"""Split (shared expense) and split member ORM models."""

from __future__ import annotations

import enum
from datetime import datetime
from decimal import Decimal
from uuid import uuid4

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Enum,
    ForeignKey,
    Numeric,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from wallet_splits.db.base import Base
from wallet_splits.domain.records import SplitStatus


class SplitType(enum.StrEnum):
    """How the split total was divided when it was created."""

    EQUAL = "EQUAL"
    CUSTOM = "CUSTOM"


class Split(Base):
    """Expense fronted by ``paid_by`` inside a group."""

    __tablename__ = "splits"
    __table_args__ = (
        CheckConstraint("total_amount > 0", name="ck_splits_total_positive"),
    )

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=lambda: str(uuid4())
    )
    group_id: Mapped[str] = mapped_column(ForeignKey("groups.id"), nullable=False)
    creator_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(8), nullable=False, default="USD")
    split_type: Mapped[SplitType] = mapped_column(
        Enum(SplitType, name="split_type"),
        nullable=False,
        default=SplitType.EQUAL,
    )
    status: Mapped[SplitStatus] = mapped_column(
        Enum(SplitStatus, name="split_status"),
        nullable=False,
        default=SplitStatus.ACTIVE,
    )
    paid_by: Mapped[str] = mapped_column(String(128), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


class SplitMember(Base):
    """One user's share of a split."""

    __tablename__ = "split_members"
    __table_args__ = (
        UniqueConstraint("split_id", "user_id", name="uq_split_members_split_user"),
        CheckConstraint("amount >= 0", name="ck_split_members_amount_non_negative"),
    )

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=lambda: str(uuid4())
    )
    split_id: Mapped[str] = mapped_column(ForeignKey("splits.id"), nullable=False)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    is_paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    paid_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
