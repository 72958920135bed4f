"""
Covid Portal Backend - District SQLAlchemy Model
==================================================

What:  ORM model for the `district` table.
How:   The full lifecycle (create, read, replace, delete) is owned by API
       consumers through the /districts/ endpoints.

Data Rules:
    - district_id is assigned by SQLite on insert (INTEGER PRIMARY KEY).
    - state_id references state.state_id, but the reference is NOT checked:
      SQLite leaves foreign keys unenforced unless PRAGMA foreign_keys=ON,
      and the service performs no lookup, so dangling ids are stored as given.
    - cases / cured / active / deaths are stored exactly as provided; no
      cross-field consistency check (cured + active + deaths <= cases).
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from covid_portal.database import Base


class District(Base):
    """Per-district COVID-19 counters."""

    __tablename__ = "district"

    district_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    district_name: Mapped[str] = mapped_column(String(255), nullable=False)
    state_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("state.state_id"),
        nullable=False,
        index=True,
    )

    # ── Counters ──────────────────────────────────────────────────────────
    cases: Mapped[int] = mapped_column(Integer, nullable=False)
    cured: Mapped[int] = mapped_column(Integer, nullable=False)
    active: Mapped[int] = mapped_column(Integer, nullable=False)
    deaths: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<District(district_id={self.district_id}, "
            f"district_name='{self.district_name}', state_id={self.state_id})>"
        )
