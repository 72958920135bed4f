"""
Covid Portal Backend - User SQLAlchemy Model
==============================================

What:  ORM model for the `user` table (the credential store).
How:   Read once per login attempt by UserService; never written by the API.
       Rows are seeded out-of-band with bcrypt password hashes.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from covid_portal.database import Base


class User(Base):
    """A portal user allowed to request bearer tokens."""

    __tablename__ = "user"

    username: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
        comment="Unique login name",
    )

    # One-way hash digest; the plaintext is never stored
    password: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="bcrypt hash of the user's password",
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"
