"""
카테고리 API 테스트 (관리자 전용)
"""

import pytest

from tests.fixtures.api import auth_headers, create_product


class TestCategoryAccess:
    """권한 테스트"""

    @pytest.mark.parametrize(
        "method,path",
        [("get", "/category"), ("get", "/category/1"), ("delete", "/category/1")],
    )
    async def test_non_admin_forbidden(self, client, user_token, method, path):
        response = await client.request(method.upper(), path, headers=auth_headers(user_token))

        assert response.status_code == 403
        body = response.json()
        assert body["message"] == "Forbidden"
        assert body["errors"] == ["admin only"]

    async def test_requires_token(self, client):
        response = await client.get("/category")

        assert response.status_code == 401


class TestCategoryCrud:
    """관리자 CRUD"""

    async def test_create_and_list(self, client, admin_token):
        headers = auth_headers(admin_token)

        created = await client.post("/category", json={"nama_category": "Fashion"}, headers=headers)
        listed = await client.get("/category", headers=headers)

        assert created.status_code == 201
        assert created.json()["data"]["nama_category"] == "Fashion"
        assert listed.json()["data"] == [created.json()["data"]]

    async def test_create_requires_name(self, client, admin_token):
        response = await client.post(
            "/category", json={"nama_category": "  "}, headers=auth_headers(admin_token)
        )

        assert response.status_code == 400

    async def test_update(self, client, admin_token, category_id):
        response = await client.put(
            f"/category/{category_id}",
            json={"nama_category": "Gadget"},
            headers=auth_headers(admin_token),
        )

        assert response.status_code == 200
        assert response.json()["data"] == {"id": category_id, "nama_category": "Gadget"}

    async def test_not_found(self, client, admin_token):
        headers = auth_headers(admin_token)

        get_response = await client.get("/category/999", headers=headers)
        put_response = await client.put("/category/999", json={"nama_category": "X"}, headers=headers)
        delete_response = await client.delete("/category/999", headers=headers)

        for response in (get_response, put_response, delete_response):
            assert response.status_code == 404

    async def test_delete(self, client, admin_token, category_id):
        headers = auth_headers(admin_token)

        response = await client.delete(f"/category/{category_id}", headers=headers)

        assert response.status_code == 200
        assert (await client.get(f"/category/{category_id}", headers=headers)).status_code == 404

    async def test_delete_category_in_use(self, client, admin_token, user_token, category_id):
        """상품이 사용 중인 카테고리는 삭제 불가"""
        await create_product(client, user_token, category_id)

        response = await client.delete(f"/category/{category_id}", headers=auth_headers(admin_token))

        assert response.status_code == 400
        assert response.json()["message"] == "Failed to DELETE data"
