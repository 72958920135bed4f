"""
Covid Portal Backend - State SQLAlchemy Model
===============================================

What:  ORM model for the `state` table.
How:   Reference data only: the API reads states (list, detail) and aggregates
       district counters per state, but exposes no way to modify them.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from covid_portal.database import Base


class State(Base):
    """An Indian state or union territory."""

    __tablename__ = "state"

    state_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    state_name: Mapped[str] = mapped_column(String(255), nullable=False)
    population: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<State(state_id={self.state_id}, state_name='{self.state_name}')>"
