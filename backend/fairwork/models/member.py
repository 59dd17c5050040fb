"""Project member model."""
from decimal import Decimal
from enum import Enum as PyEnum
from typing import Any

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fairwork.database import Base


class MemberRole(str, PyEnum):
    MEMBER = "member"
    # Coordinates the group; never receives auto-assigned execution work
    SHERPA = "sherpa"

    @property
    def is_assignable(self) -> bool:
        """Whether automatic task assignment may target this role."""
        return self in ASSIGNABLE_ROLES


# Closed set: a new role stays out of auto-assignment until listed here.
ASSIGNABLE_ROLES = frozenset({MemberRole.MEMBER})


class Member(Base):
    """Member of a project with self-reported contribution."""

    __tablename__ = "members"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    role: Mapped[MemberRole] = mapped_column(
        Enum(MemberRole),
        nullable=False,
        default=MemberRole.MEMBER,
    )
    manual_hours: Mapped[Decimal] = mapped_column(Numeric(8, 2), nullable=False, default=0)
    manual_tasks: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Functional tags, e.g. ["frontend", "docs"]; informational only
    assigned_roles: Mapped[list[Any] | None] = mapped_column(JSON, nullable=True)
    joined_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    project: Mapped["Project"] = relationship("Project", back_populates="members")
