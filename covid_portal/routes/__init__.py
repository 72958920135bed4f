"""
Covid Portal Backend - API Routes Package
===========================================

Route Inventory:
    - login.py:      POST   /login/                     (no auth)
    - states.py:     GET    /states/
                     GET    /states/{stateId}/
                     GET    /states/{stateId}/stats/
    - districts.py:  POST   /districts/
                     GET    /districts/{districtId}/
                     PUT    /districts/{districtId}/
                     DELETE /districts/{districtId}/

Routes stay THIN: extract input, call a service, shape the response.
Failures are raised, never answered inline, so the global exception
handlers in main.py produce the single response.
"""
