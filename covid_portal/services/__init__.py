"""
Covid Portal Backend - Services Layer
=======================================

What:  Data access and business rules between routes (HTTP) and the database.
How:   Stateless service classes with a module-level instance each; every
       method receives the request's AsyncSession explicitly.

Service Inventory:
    - UserService:     credential lookup and token issuance (login)
    - StateService:    state reads and per-state aggregation
    - DistrictService: district create / read / replace / delete
"""
