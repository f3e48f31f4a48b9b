"""
상품 API 테스트
"""

import pytest
from sqlalchemy import select

from marketplace.monitoring import global_metrics
from marketplace.services.exceptions import BadRequestError
from marketplace.storage.products import ProductRepository
from marketplace.storage.tables import FotoProduk
from tests.fixtures.api import auth_headers, create_product


class TestProductCreate:
    """POST /product"""

    async def test_create_with_photos(self, client, user_token, category_id, test_env):
        photos = [
            ("photos", ("depan.jpg", b"front", "image/jpeg")),
            ("photos", ("belakang.jpg", b"back", "image/jpeg")),
        ]

        product_id = await create_product(
            client, user_token, category_id, files=photos, nama_produk="  Kabel Data USB "
        )

        response = await client.get(f"/product/{product_id}")
        data = response.json()["data"]
        assert data["nama_produk"] == "Kabel Data USB"
        assert data["slug"] == "kabel-data-usb"
        assert data["harga_reseler"] == 10000
        assert data["harga_konsumen"] == 15000
        assert data["stok"] == 10
        assert data["toko"]["nama_toko"] == "Budi Store"
        assert data["category"] == {"id": category_id, "nama_category": "Elektronik"}
        assert len(data["photos"]) == 2
        assert all(photo["product_id"] == product_id for photo in data["photos"])
        assert data["photos"][0]["url"].endswith("-depan.jpg")
        assert (test_env["upload_path"] / data["photos"][0]["url"]).exists()
        assert global_metrics.get_metric("products.created").get_value() == 1

    @pytest.mark.parametrize(
        "field,value",
        [
            ("harga_reseller", "abc"),
            ("harga_konsumen", "0"),
            ("stok", "-1"),
            ("category_id", "x"),
            ("harga_konsumen", "99999999999999999999999"),
            ("harga_reseller", "1000000000001"),
            ("stok", "2147483648"),
            ("category_id", "2147483648"),
        ],
    )
    async def test_invalid_numbers(self, client, user_token, category_id, field, value):
        data = {
            "nama_produk": "Kaos",
            "category_id": str(category_id),
            "harga_reseller": "1000",
            "harga_konsumen": "2000",
            "stok": "1",
        }
        data[field] = value

        response = await client.post("/product", data=data, headers=auth_headers(user_token))

        assert response.status_code == 400
        assert response.json()["errors"] == [f"invalid {field}"]

    async def test_price_above_32bit(self, client, user_token, category_id):
        """가격은 32비트 정수 범위를 넘어도 저장"""
        product_id = await create_product(
            client, user_token, category_id, harga_reseller="4000000000", harga_konsumen="1000000000000"
        )

        data = (await client.get(f"/product/{product_id}")).json()["data"]

        assert data["harga_reseler"] == 4000000000
        assert data["harga_konsumen"] == 1000000000000

    async def test_failed_save_removes_uploaded_files(
        self, client, user_token, category_id, test_env, monkeypatch
    ):
        """저장 실패 시 업로드한 파일도 남지 않음"""

        async def fail_add(self, record):
            raise BadRequestError("gagal menyimpan produk")

        monkeypatch.setattr(ProductRepository, "add", fail_add)

        response = await client.post(
            "/product",
            data={
                "nama_produk": "Kaos",
                "category_id": str(category_id),
                "harga_reseller": "1000",
                "harga_konsumen": "2000",
                "stok": "1",
            },
            files=[("photos", ("gagal-simpan.jpg", b"x", "image/jpeg"))],
            headers=auth_headers(user_token),
        )

        assert response.status_code == 400
        assert list(test_env["upload_path"].glob("*-gagal-simpan.jpg")) == []

    async def test_missing_fields(self, client, user_token):
        response = await client.post(
            "/product", data={"nama_produk": "Kaos"}, headers=auth_headers(user_token)
        )

        assert response.status_code == 400
        assert "stok wajib diisi" in response.json()["errors"]

    async def test_unknown_category(self, client, user_token):
        response = await client.post(
            "/product",
            data={
                "nama_produk": "Kaos",
                "category_id": "999",
                "harga_reseller": "1000",
                "harga_konsumen": "2000",
                "stok": "1",
            },
            headers=auth_headers(user_token),
        )

        assert response.status_code == 400

    async def test_requires_auth(self, client, category_id):
        response = await client.post("/product", data={"nama_produk": "Kaos"})

        assert response.status_code == 401


class TestProductRead:
    """GET /product"""

    async def test_not_found(self, client):
        response = await client.get("/product/999")

        assert response.status_code == 404
        assert response.json()["errors"] == ["No Data Product"]

    async def test_list_filters(self, client, user_token, other_token, category_id):
        await create_product(client, user_token, category_id, nama_produk="Kaos Polos", harga_konsumen="50000")
        await create_product(client, user_token, category_id, nama_produk="Kaos Band", harga_konsumen="120000")
        other_id = await create_product(client, other_token, category_id, nama_produk="Topi")

        by_name = await client.get("/product", params={"nama_produk": "kaos"})
        by_price = await client.get("/product", params={"min_harga": "60000", "max_harga": "200000"})
        other = (await client.get(f"/product/{other_id}")).json()["data"]
        by_toko = await client.get("/product", params={"toko_id": str(other["toko"]["id"])})
        ignored = await client.get("/product", params={"category_id": "abc", "limit": "2"})

        assert [p["nama_produk"] for p in by_name.json()["data"]["data"]] == ["Kaos Polos", "Kaos Band"]
        assert [p["nama_produk"] for p in by_price.json()["data"]["data"]] == ["Kaos Band"]
        assert [p["id"] for p in by_toko.json()["data"]["data"]] == [other_id]
        # 숫자가 아닌 필터는 무시
        assert len(ignored.json()["data"]["data"]) == 2

    async def test_out_of_range_query_numbers(self, client, product_id):
        """64비트 범위를 넘는 필터와 페이지 값은 무시"""
        huge = "9" * 30

        response = await client.get(
            "/product", params={"min_harga": huge, "toko_id": huge, "limit": huge, "page": huge}
        )

        assert response.status_code == 200
        assert [p["id"] for p in response.json()["data"]["data"]] == [product_id]


class TestProductUpdate:
    """PUT /product/{id}"""

    async def test_update_name_and_slug(self, client, user_token, product_id):
        response = await client.put(
            f"/product/{product_id}",
            data={"nama_produk": "Kabel Type C", "stok": "25"},
            headers=auth_headers(user_token),
        )

        assert response.status_code == 200
        assert response.json()["data"] == ""

        data = (await client.get(f"/product/{product_id}")).json()["data"]
        assert data["nama_produk"] == "Kabel Type C"
        assert data["slug"] == "kabel-type-c"
        assert data["stok"] == 25
        assert data["harga_konsumen"] == 15000

    async def test_photos_are_replaced(self, client, user_token, category_id, session_factory, test_env):
        """새 사진 업로드 시 기존 사진 전부 교체"""
        product_id = await create_product(
            client,
            user_token,
            category_id,
            files=[("photos", ("a.jpg", b"a", "image/jpeg")), ("photos", ("b.jpg", b"b", "image/jpeg"))],
        )

        old_urls = [p["url"] for p in (await client.get(f"/product/{product_id}")).json()["data"]["photos"]]

        response = await client.put(
            f"/product/{product_id}",
            files=[("photos", ("c.jpg", b"c", "image/jpeg"))],
            headers=auth_headers(user_token),
        )

        assert response.status_code == 200
        photos = (await client.get(f"/product/{product_id}")).json()["data"]["photos"]
        assert len(photos) == 1
        assert photos[0]["url"].endswith("-c.jpg")

        async with session_factory() as session:
            rows = (await session.execute(select(FotoProduk))).scalars().all()
        assert len(rows) == 1

        # 교체된 파일은 삭제, 새 파일은 유지
        assert all(not (test_env["upload_path"] / url).exists() for url in old_urls)
        assert (test_env["upload_path"] / photos[0]["url"]).exists()

    async def test_other_users_product(self, client, other_token, product_id):
        response = await client.put(
            f"/product/{product_id}", data={"stok": "1"}, headers=auth_headers(other_token)
        )

        assert response.status_code == 404
        assert response.json()["errors"] == ["No Data Product"]

    async def test_invalid_value(self, client, user_token, product_id):
        response = await client.put(
            f"/product/{product_id}", data={"harga_konsumen": "murah"}, headers=auth_headers(user_token)
        )

        assert response.status_code == 400
        assert response.json()["errors"] == ["invalid harga_konsumen"]


class TestProductDelete:
    """DELETE /product/{id}"""

    async def test_delete_removes_photos(self, client, user_token, category_id, session_factory, test_env):
        product_id = await create_product(
            client, user_token, category_id, files=[("photos", ("a.jpg", b"a", "image/jpeg"))]
        )
        url = (await client.get(f"/product/{product_id}")).json()["data"]["photos"][0]["url"]
        assert (test_env["upload_path"] / url).exists()

        response = await client.delete(f"/product/{product_id}", headers=auth_headers(user_token))

        assert response.status_code == 200
        assert (await client.get(f"/product/{product_id}")).status_code == 404
        async with session_factory() as session:
            assert (await session.execute(select(FotoProduk))).scalars().all() == []
        assert not (test_env["upload_path"] / url).exists()

    async def test_other_users_product(self, client, other_token, product_id):
        response = await client.delete(f"/product/{product_id}", headers=auth_headers(other_token))

        assert response.status_code == 404
