import uuid

import pytest

from tests.utils.factories import create_project_factory, create_saved_variation_factory


class TestProjects:
    @pytest.mark.asyncio
    async def test_should_create_and_list_projects(self, test_client, admin_headers):
        created = await test_client.post(
            "/api/projects", json={"name": "  Navidad 2026 "}, headers=admin_headers
        )
        listing = await test_client.get("/api/projects", headers=admin_headers)

        assert created.status_code == 201
        assert created.json()["name"] == "Navidad 2026"
        assert [p["id"] for p in listing.json()] == [created.json()["id"]]

    @pytest.mark.asyncio
    async def test_should_return_400_for_empty_name(self, test_client, admin_headers):
        response = await test_client.post("/api/projects", json={"name": ""}, headers=admin_headers)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_keeps_variations_without_project(
        self, test_client, admin_headers, db_session, test_brand
    ):
        project = create_project_factory(db_session)
        variation = create_saved_variation_factory(db_session, client=test_brand, project=project)

        response = await test_client.delete(f"/api/projects/{project.id}", headers=admin_headers)

        assert response.status_code == 204
        fetched = await test_client.get(f"/api/saved/{variation.id}", headers=admin_headers)
        assert fetched.status_code == 200
        assert fetched.json()["project_id"] is None

    @pytest.mark.asyncio
    async def test_should_return_404_for_unknown_project(self, test_client, admin_headers):
        response = await test_client.delete(f"/api/projects/{uuid.uuid4()}", headers=admin_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_should_return_403_for_client_user(self, test_client, client_headers):
        response = await test_client.get("/api/projects", headers=client_headers)

        assert response.status_code == 403
