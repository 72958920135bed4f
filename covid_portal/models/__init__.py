"""
Covid Portal Backend - ORM Models
===================================

Table Inventory:
    - user.py:     `user`     (credential store, seeded out-of-band)
    - state.py:    `state`    (read-only reference data)
    - district.py: `district` (created/updated/deleted through the API)
"""

from covid_portal.models.district import District
from covid_portal.models.state import State
from covid_portal.models.user import User

__all__ = ["District", "State", "User"]
