import uuid

import pytest

from app.library.models.saved_variation import SavedVariation
from tests.utils.factories import create_project_factory, create_saved_variation_factory


def save_payload(client_id, **overrides):
    payload = {
        "client_id": str(client_id),
        "platform": "Email",
        "type": "Curiosidad",
        "content": (
            "¿Y si viajas gratis? - Tus puntos valen más - Suma en cada tanqueo - Descubre cómo"
        ),
        "char_count": 83,
        "segments": {
            "subject": "¿Y si viajas gratis?",
            "header": "Tus puntos valen más",
            "body": "Suma en cada tanqueo",
            "cta": "Descubre cómo",
        },
        "tags": ["verano", " viajes ", "verano"],
    }
    payload.update(overrides)
    return payload


class TestSaveVariation:
    @pytest.mark.asyncio
    async def test_should_store_variation_as_sent(self, test_client, admin_headers, test_brand):
        payload = save_payload(test_brand.id)

        response = await test_client.post("/api/saved", json=payload, headers=admin_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["char_count"] == 83
        assert data["segments"] == payload["segments"]
        assert data["tags"] == ["verano", "viajes"]
        assert data["is_approved"] is False
        assert data["project"] is None

    @pytest.mark.asyncio
    async def test_should_keep_reported_char_count(self, test_client, admin_headers, test_brand):
        payload = save_payload(test_brand.id, content="abc", char_count=500)

        response = await test_client.post("/api/saved", json=payload, headers=admin_headers)
        saved_id = response.json()["id"]
        fetched = await test_client.get(f"/api/saved/{saved_id}", headers=admin_headers)

        assert fetched.json()["content"] == "abc"
        assert fetched.json()["char_count"] == 500

    @pytest.mark.asyncio
    async def test_should_attach_project(
        self, test_client, admin_headers, db_session, test_brand
    ):
        project = create_project_factory(db_session, name="Q3")

        response = await test_client.post(
            "/api/saved",
            json=save_payload(test_brand.id, project_id=str(project.id)),
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["project"]["name"] == "Q3"

    @pytest.mark.asyncio
    async def test_should_return_404_for_unknown_project(
        self, test_client, admin_headers, test_brand
    ):
        response = await test_client.post(
            "/api/saved",
            json=save_payload(test_brand.id, project_id=str(uuid.uuid4())),
            headers=admin_headers,
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_should_return_400_for_negative_char_count(
        self, test_client, admin_headers, test_brand
    ):
        response = await test_client.post(
            "/api/saved", json=save_payload(test_brand.id, char_count=-3), headers=admin_headers
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_should_return_403_for_client_user(self, test_client, client_headers, test_brand):
        response = await test_client.post(
            "/api/saved", json=save_payload(test_brand.id), headers=client_headers
        )

        assert response.status_code == 403


class TestListSavedVariations:
    @pytest.mark.asyncio
    async def test_should_scope_client_user_to_own_brand(
        self, test_client, client_headers, db_session, test_brand, other_brand
    ):
        own = create_saved_variation_factory(db_session, client=test_brand)
        create_saved_variation_factory(db_session, client=other_brand)

        response = await test_client.get("/api/saved", headers=client_headers)

        assert [v["id"] for v in response.json()] == [str(own.id)]

    @pytest.mark.asyncio
    async def test_should_ignore_foreign_brand_filter_for_client_user(
        self, test_client, client_headers, db_session, test_brand, other_brand
    ):
        create_saved_variation_factory(db_session, client=other_brand)

        response = await test_client.get(
            "/api/saved", params={"client_id": str(other_brand.id)}, headers=client_headers
        )

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_should_filter_by_platform_approval_tag_and_search(
        self, test_client, admin_headers, db_session, test_brand
    ):
        target = create_saved_variation_factory(
            db_session,
            client=test_brand,
            platform="Instagram",
            content="Ruta del café en familia",
            tags=["familia"],
            is_approved=True,
        )
        create_saved_variation_factory(db_session, client=test_brand, platform="Instagram")
        create_saved_variation_factory(
            db_session, client=test_brand, content="Ruta sin café", tags=["familia"]
        )

        response = await test_client.get(
            "/api/saved",
            params={
                "platform": "Instagram",
                "approved": "true",
                "tag": "familia",
                "search": "café",
            },
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert [v["id"] for v in response.json()] == [str(target.id)]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("search", ["%", "_", "50%"])
    async def test_should_match_wildcard_characters_literally(
        self, test_client, admin_headers, db_session, test_brand, search
    ):
        create_saved_variation_factory(db_session, client=test_brand, content="Ahorra en gasolina")
        discount = create_saved_variation_factory(
            db_session, client=test_brand, content="Hoy 50% off_en tienda"
        )

        response = await test_client.get(
            "/api/saved", params={"search": search}, headers=admin_headers
        )

        assert response.status_code == 200
        assert [v["id"] for v in response.json()] == [str(discount.id)]

    @pytest.mark.asyncio
    async def test_should_filter_by_project(
        self, test_client, admin_headers, db_session, test_brand
    ):
        project = create_project_factory(db_session)
        in_project = create_saved_variation_factory(db_session, client=test_brand, project=project)
        create_saved_variation_factory(db_session, client=test_brand)

        response = await test_client.get(
            "/api/saved", params={"project_id": str(project.id)}, headers=admin_headers
        )

        assert [v["id"] for v in response.json()] == [str(in_project.id)]

    @pytest.mark.asyncio
    async def test_should_return_newest_first(
        self, test_client, admin_headers, db_session, test_brand
    ):
        older = create_saved_variation_factory(db_session, client=test_brand)
        newer = create_saved_variation_factory(db_session, client=test_brand)

        response = await test_client.get("/api/saved", headers=admin_headers)

        assert [v["id"] for v in response.json()] == [str(newer.id), str(older.id)]


class TestGetSavedVariation:
    @pytest.mark.asyncio
    async def test_should_hide_other_brand_records(
        self, test_client, client_headers, db_session, other_brand
    ):
        foreign = create_saved_variation_factory(db_session, client=other_brand)

        response = await test_client.get(f"/api/saved/{foreign.id}", headers=client_headers)

        assert response.status_code == 404


class TestUpdateSavedVariation:
    @pytest.mark.asyncio
    async def test_client_user_can_approve_own_variation(
        self, test_client, client_headers, db_session, test_brand
    ):
        variation = create_saved_variation_factory(db_session, client=test_brand)

        response = await test_client.put(
            f"/api/saved/{variation.id}", json={"is_approved": True}, headers=client_headers
        )

        assert response.status_code == 200
        assert response.json()["is_approved"] is True

    @pytest.mark.asyncio
    async def test_should_store_edited_content_and_char_count(
        self, test_client, client_headers, db_session, test_brand
    ):
        variation = create_saved_variation_factory(db_session, client=test_brand)

        response = await test_client.put(
            f"/api/saved/{variation.id}",
            json={
                "content": "Nuevo título | Nuevo cuerpo",
                "char_count": 27,
                "segments": {"title": "Nuevo título", "body": "Nuevo cuerpo"},
            },
            headers=client_headers,
        )

        data = response.json()
        assert data["content"] == "Nuevo título | Nuevo cuerpo"
        assert data["char_count"] == 27
        assert data["segments"]["title"] == "Nuevo título"

    @pytest.mark.asyncio
    async def test_client_user_cannot_move_variation_between_projects(
        self, test_client, client_headers, db_session, test_brand
    ):
        variation = create_saved_variation_factory(db_session, client=test_brand)
        project = create_project_factory(db_session)

        response = await test_client.put(
            f"/api/saved/{variation.id}",
            json={"project_id": str(project.id)},
            headers=client_headers,
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_client_user_cannot_edit_other_brand(
        self, test_client, client_headers, db_session, other_brand
    ):
        foreign = create_saved_variation_factory(db_session, client=other_brand)

        response = await test_client.put(
            f"/api/saved/{foreign.id}", json={"is_approved": True}, headers=client_headers
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_admin_can_detach_project(
        self, test_client, admin_headers, db_session, test_brand
    ):
        project = create_project_factory(db_session)
        variation = create_saved_variation_factory(db_session, client=test_brand, project=project)

        response = await test_client.put(
            f"/api/saved/{variation.id}", json={"project_id": None}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["project_id"] is None


class TestDeleteSavedVariation:
    @pytest.mark.asyncio
    async def test_should_delete_unapproved_variation(
        self, test_client, admin_headers, db_session, test_brand
    ):
        variation = create_saved_variation_factory(db_session, client=test_brand)

        response = await test_client.delete(f"/api/saved/{variation.id}", headers=admin_headers)

        assert response.status_code == 204
        assert db_session.query(SavedVariation).count() == 0

    @pytest.mark.asyncio
    async def test_should_return_409_for_approved_variation(
        self, test_client, admin_headers, db_session, test_brand
    ):
        variation = create_saved_variation_factory(db_session, client=test_brand, is_approved=True)

        response = await test_client.delete(f"/api/saved/{variation.id}", headers=admin_headers)

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_should_return_403_for_client_user(
        self, test_client, client_headers, db_session, test_brand
    ):
        variation = create_saved_variation_factory(db_session, client=test_brand)

        response = await test_client.delete(f"/api/saved/{variation.id}", headers=client_headers)

        assert response.status_code == 403
