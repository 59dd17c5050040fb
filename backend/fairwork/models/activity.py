"""Weekly check-in and peer review models."""
from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from fairwork.database import Base


class CheckIn(Base):
    """Weekly reflection submitted by a member. Several per week are allowed."""

    __tablename__ = "check_ins"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    member_id: Mapped[int] = mapped_column(
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
    )
    week_of: Mapped[str] = mapped_column(String(8), nullable=False)  # YYYY-Www
    what_did_i_do: Mapped[str] = mapped_column(Text, nullable=False, default="")
    what_blocked_me: Mapped[str] = mapped_column(Text, nullable=False, default="Nothing")
    what_will_i_do_next: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class PeerReview(Base):
    """Anonymous 1-5 rating of one member by another."""

    __tablename__ = "peer_reviews"
    __table_args__ = (
        CheckConstraint("score >= 1 AND score <= 5", name="ck_peer_reviews_score_range"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    reviewer_id: Mapped[int] = mapped_column(
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
    )
    reviewed_member_id: Mapped[int] = mapped_column(
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    week_of: Mapped[str] = mapped_column(String(8), nullable=False)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
