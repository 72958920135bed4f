"""
Covid Portal Backend - State Route Tests
==========================================

What we test:
    ✅ List returns every state in storage order, camelCase
    ✅ Detail returns one state or 404 "State not found"
    ✅ Stats sums district counters; no districts → nulls with 200
    ✅ Non-integer ids → 400
"""

import pytest


class TestListStates:

    @pytest.mark.asyncio
    async def test_list_states(self, test_client, auth_headers):
        response = await test_client.get("/states/", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == [
            {"stateId": 1, "stateName": "Andaman and Nicobar Islands", "population": 380581},
            {"stateId": 2, "stateName": "Andhra Pradesh", "population": 49386799},
            {"stateId": 3, "stateName": "Arunachal Pradesh", "population": 1383727},
        ]

    @pytest.mark.asyncio
    async def test_list_states_empty(self, test_client, auth_headers, engine):
        from sqlalchemy import delete
        from covid_portal.models import State

        async with engine.begin() as conn:
            await conn.execute(delete(State))

        response = await test_client.get("/states/", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == []


class TestGetState:

    @pytest.mark.asyncio
    async def test_get_state(self, test_client, auth_headers):
        response = await test_client.get("/states/2/", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "stateId": 2,
            "stateName": "Andhra Pradesh",
            "population": 49386799,
        }

    @pytest.mark.asyncio
    async def test_get_state_not_found(self, test_client, auth_headers):
        response = await test_client.get("/states/999/", headers=auth_headers)
        assert response.status_code == 404
        assert response.text == "State not found"

    @pytest.mark.asyncio
    async def test_get_state_non_integer_id(self, test_client, auth_headers):
        response = await test_client.get("/states/abc/", headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["error"] == "Bad Request"


class TestStateStats:

    @pytest.mark.asyncio
    async def test_stats_sums_districts(self, test_client, auth_headers):
        response = await test_client.get("/states/1/stats/", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "totalCases": 160,
            "totalCured": 130,
            "totalActive": 23,
            "totalDeaths": 7,
        }

    @pytest.mark.asyncio
    async def test_stats_without_districts_is_null(self, test_client, auth_headers):
        """State 3 exists but has no districts: SUM over zero rows is NULL."""
        response = await test_client.get("/states/3/stats/", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "totalCases": None,
            "totalCured": None,
            "totalActive": None,
            "totalDeaths": None,
        }

    @pytest.mark.asyncio
    async def test_stats_for_unknown_state_is_not_404(self, test_client, auth_headers):
        response = await test_client.get("/states/999/stats/", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["totalCases"] is None

    @pytest.mark.asyncio
    async def test_stats_follow_district_changes(self, test_client, auth_headers):
        await test_client.post(
            "/districts/",
            json={"districtName": "Chittoor", "stateId": 2, "cases": 10,
                  "cured": 5, "active": 4, "deaths": 1},
            headers=auth_headers,
        )
        response = await test_client.get("/states/2/stats/", headers=auth_headers)
        assert response.json() == {
            "totalCases": 510,
            "totalCured": 405,
            "totalActive": 94,
            "totalDeaths": 11,
        }
