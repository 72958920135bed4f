"""
Covid Portal Backend - Pydantic Schemas
=========================================

What:  The HTTP contract. Storage columns are snake_case (state_id); the API
       speaks camelCase (stateId). Every schema converts between the two with
       a camelCase alias generator, so routes and services only ever see
       Python field names.
"""
