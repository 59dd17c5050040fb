"""Project model."""
from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fairwork.database import Base


class Project(Base):
    """Student group project."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    total_tasks_needed: Mapped[int] = mapped_column(Integer, nullable=False, default=10)
    project_lead: Mapped[str | None] = mapped_column(String(50), nullable=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    members: Mapped[list["Member"]] = relationship(
        "Member",
        back_populates="project",
        order_by="Member.id",
        cascade="all, delete-orphan",
    )
    tasks: Mapped[list["Task"]] = relationship(
        "Task",
        back_populates="project",
        order_by="Task.id",
        cascade="all, delete-orphan",
    )
