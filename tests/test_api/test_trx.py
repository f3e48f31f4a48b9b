"""
주문(trx) API 테스트
"""

import re

from sqlalchemy import func, select

from marketplace.monitoring import global_metrics
from marketplace.services.exceptions import BadRequestError
from marketplace.storage.tables import DetailTrx, LogProduk, Produk, Trx
from marketplace.storage.transactions import TrxRepository
from tests.fixtures.api import auth_headers, create_alamat, create_product


async def count_rows(session_factory, table) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(table))).scalar_one()


async def get_stok(session_factory, product_id: int) -> int:
    async with session_factory() as session:
        return (await session.get(Produk, product_id)).stok


def trx_body(alamat_id, *lines, method_bayar="COD"):
    return {
        "method_bayar": method_bayar,
        "alamat_kirim": alamat_id,
        "detail_trx": [{"product_id": pid, "kuantitas": qty} for pid, qty in lines],
    }


class TestCreateTrx:
    """POST /trx"""

    async def test_create_success(self, client, user_token, alamat_id, product_id, session_factory):
        """주문 생성 시 스냅샷 기록 및 재고 차감"""
        response = await client.post(
            "/trx", json=trx_body(alamat_id, (product_id, 3)), headers=auth_headers(user_token)
        )

        assert response.status_code == 200
        trx_id = response.json()["data"]

        detail = await client.get(f"/trx/{trx_id}", headers=auth_headers(user_token))
        data = detail.json()["data"]
        assert data["harga_total"] == 45000
        assert re.fullmatch(r"INV-\d+", data["kode_invoice"])
        assert data["method_bayar"] == "COD"
        assert data["alamat_kirim"]["id"] == alamat_id
        assert len(data["detail_trx"]) == 1

        line = data["detail_trx"][0]
        assert line["kuantitas"] == 3
        assert line["harga_total"] == 45000
        assert line["toko"]["nama_toko"] == "Budi Store"
        assert line["product"]["id"] == product_id
        assert line["product"]["nama_produk"] == "Kabel Data USB"
        assert line["product"]["harga_reseler"] == 10000
        assert line["product"]["toko"] == {"nama_toko": "Budi Store", "url_foto": None}

        assert await get_stok(session_factory, product_id) == 7
        assert await count_rows(session_factory, LogProduk) == 1
        assert global_metrics.get_metric("trx.created").get_value() == 1

    async def test_duplicate_lines_share_stock(
        self, client, user_token, alamat_id, category_id, session_factory
    ):
        """같은 상품 여러 줄은 남은 재고 기준으로 확인"""
        product_id = await create_product(client, user_token, category_id, stok="5")

        ok = await client.post(
            "/trx",
            json=trx_body(alamat_id, (product_id, 2), (product_id, 3)),
            headers=auth_headers(user_token),
        )
        assert ok.status_code == 200
        assert await get_stok(session_factory, product_id) == 0
        assert await count_rows(session_factory, DetailTrx) == 2

        too_many = await client.post(
            "/trx", json=trx_body(alamat_id, (product_id, 1)), headers=auth_headers(user_token)
        )
        assert too_many.status_code == 400
        assert too_many.json()["errors"] == ["stok tidak cukup"]

    async def test_insufficient_stock_writes_nothing(
        self, client, user_token, alamat_id, category_id, session_factory
    ):
        """재고 부족 시 주문, 스냅샷, 재고 모두 변경 없음"""
        first = await create_product(client, user_token, category_id, stok="10")
        second = await create_product(client, user_token, category_id, nama_produk="Charger", stok="1")

        response = await client.post(
            "/trx",
            json=trx_body(alamat_id, (first, 4), (second, 2)),
            headers=auth_headers(user_token),
        )

        assert response.status_code == 400
        assert response.json()["errors"] == ["stok tidak cukup"]
        assert await get_stok(session_factory, first) == 10
        assert await get_stok(session_factory, second) == 1
        for table in (Trx, LogProduk, DetailTrx):
            assert await count_rows(session_factory, table) == 0

    async def test_failure_after_flush_rolls_back(
        self, client, user_token, alamat_id, product_id, session_factory, monkeypatch
    ):
        """행이 기록된 뒤 실패해도 주문, 스냅샷, 재고 모두 원래대로"""
        original = TrxRepository.create_with_details

        async def create_then_fail(self, trx, logs, details):
            await original(self, trx, logs, details)
            assert trx.id is not None
            raise BadRequestError("gagal menyimpan trx")

        monkeypatch.setattr(TrxRepository, "create_with_details", create_then_fail)

        response = await client.post(
            "/trx", json=trx_body(alamat_id, (product_id, 3)), headers=auth_headers(user_token)
        )

        assert response.status_code == 400
        assert response.json()["errors"] == ["gagal menyimpan trx"]
        assert await get_stok(session_factory, product_id) == 10
        for table in (Trx, LogProduk, DetailTrx):
            assert await count_rows(session_factory, table) == 0
        assert global_metrics.get_metric("trx.created").get_value() == 0

    async def test_total_over_bigint_range(
        self, client, user_token, alamat_id, category_id, session_factory
    ):
        """합계가 64비트 정수를 넘으면 400"""
        product_id = await create_product(
            client, user_token, category_id, harga_konsumen="1000000000000", stok="2147483647"
        )

        response = await client.post(
            "/trx",
            json=trx_body(alamat_id, (product_id, 2147483647)),
            headers=auth_headers(user_token),
        )

        assert response.status_code == 400
        assert response.json()["errors"] == ["harga_total terlalu besar"]
        assert await get_stok(session_factory, product_id) == 2147483647
        assert await count_rows(session_factory, Trx) == 0

    async def test_out_of_range_ids(self, client, user_token, alamat_id, product_id):
        headers = auth_headers(user_token)
        huge = 10**20

        bad_product = await client.post("/trx", json=trx_body(alamat_id, (huge, 1)), headers=headers)
        bad_alamat = await client.post("/trx", json=trx_body(huge, (product_id, 1)), headers=headers)
        bad_quantity = await client.post(
            "/trx", json=trx_body(alamat_id, (product_id, huge)), headers=headers
        )

        assert bad_product.json()["errors"] == ["product tidak ditemukan"]
        assert bad_alamat.json()["errors"] == ["alamat_kirim tidak ditemukan"]
        assert bad_quantity.json()["errors"] == ["stok tidak cukup"]

    async def test_empty_detail(self, client, user_token, alamat_id):
        response = await client.post(
            "/trx", json=trx_body(alamat_id), headers=auth_headers(user_token)
        )

        assert response.status_code == 400
        assert response.json()["errors"] == ["detail_trx tidak boleh kosong"]

    async def test_missing_method_bayar(self, client, user_token, alamat_id, product_id):
        response = await client.post(
            "/trx",
            json=trx_body(alamat_id, (product_id, 1), method_bayar=""),
            headers=auth_headers(user_token),
        )

        assert response.status_code == 400

    async def test_foreign_address(self, client, user_token, other_token, product_id):
        """다른 회원의 배송지"""
        foreign_alamat = await create_alamat(client, other_token)

        response = await client.post(
            "/trx", json=trx_body(foreign_alamat, (product_id, 1)), headers=auth_headers(user_token)
        )

        assert response.status_code == 400
        assert response.json()["errors"] == ["alamat_kirim tidak ditemukan"]

    async def test_unknown_product(self, client, user_token, alamat_id):
        response = await client.post(
            "/trx", json=trx_body(alamat_id, (999, 1)), headers=auth_headers(user_token)
        )

        assert response.status_code == 400
        assert response.json()["errors"] == ["product tidak ditemukan"]

    async def test_non_positive_quantity(self, client, user_token, alamat_id, product_id):
        response = await client.post(
            "/trx", json=trx_body(alamat_id, (product_id, 0)), headers=auth_headers(user_token)
        )

        assert response.status_code == 400


class TestReadTrx:
    """GET /trx"""

    async def test_list_newest_first(self, client, user_token, alamat_id, product_id):
        headers = auth_headers(user_token)
        ids = []
        for qty in (1, 2, 3):
            response = await client.post("/trx", json=trx_body(alamat_id, (product_id, qty)), headers=headers)
            ids.append(response.json()["data"])

        page_one = await client.get("/trx", params={"limit": 2}, headers=headers)
        page_two = await client.get("/trx", params={"limit": 2, "page": 2}, headers=headers)

        assert [t["id"] for t in page_one.json()["data"]["data"]] == [ids[2], ids[1]]
        assert [t["id"] for t in page_two.json()["data"]["data"]] == [ids[0]]

    async def test_other_users_trx(self, client, user_token, other_token, alamat_id, product_id):
        created = await client.post(
            "/trx", json=trx_body(alamat_id, (product_id, 1)), headers=auth_headers(user_token)
        )

        response = await client.get(f"/trx/{created.json()['data']}", headers=auth_headers(other_token))
        listed = await client.get("/trx", headers=auth_headers(other_token))

        assert response.status_code == 404
        assert response.json()["errors"] == ["No Data Trx"]
        assert listed.json()["data"]["data"] == []

    async def test_snapshot_survives_product_change(
        self, client, user_token, alamat_id, product_id
    ):
        """상품 수정/삭제 후에도 주문 시점 정보 유지"""
        headers = auth_headers(user_token)
        created = await client.post("/trx", json=trx_body(alamat_id, (product_id, 1)), headers=headers)
        trx_id = created.json()["data"]

        await client.put(
            f"/product/{product_id}",
            data={"nama_produk": "Nama Baru", "harga_konsumen": "99000"},
            headers=headers,
        )
        updated = (await client.get(f"/trx/{trx_id}", headers=headers)).json()["data"]
        assert updated["detail_trx"][0]["product"]["nama_produk"] == "Kabel Data USB"
        assert updated["detail_trx"][0]["product"]["harga_konsumen"] == 15000

        deleted = await client.delete(f"/product/{product_id}", headers=headers)
        assert deleted.status_code == 200

        after_delete = (await client.get(f"/trx/{trx_id}", headers=headers)).json()["data"]
        line = after_delete["detail_trx"][0]
        assert line["product"]["id"] is None
        assert line["product"]["nama_produk"] == "Kabel Data USB"
        assert line["product"]["photos"] == []

    async def test_requires_auth(self, client):
        assert (await client.get("/trx")).status_code == 401
