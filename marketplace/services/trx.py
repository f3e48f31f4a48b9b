"""
주문(trx) 서비스
"""

from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.domain.rules import MAX_BIGINT, MAX_INT, make_invoice_code
from marketplace.models.requests import TrxRequest
from marketplace.monitoring import get_logger, global_metrics
from marketplace.services.exceptions import BadRequestError, NotFoundError
from marketplace.storage.addresses import AlamatRepository
from marketplace.storage.products import ProductRepository
from marketplace.storage.tables import DetailTrx, LogProduk, Produk, Trx
from marketplace.storage.transactions import TrxRepository

logger = get_logger(__name__)


class TrxService:
    """주문 조회 및 생성"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.trx = TrxRepository(session)
        self.alamat = AlamatRepository(session)
        self.products = ProductRepository(session)

    async def list(self, user_id: int, limit: int, page: int) -> List[Trx]:
        return await self.trx.list_by_user(user_id, limit, page)

    async def get(self, user_id: int, trx_id: int) -> Trx:
        trx = await self.trx.get_for_user(user_id, trx_id)
        if trx is None:
            raise NotFoundError("No Data Trx")
        return trx

    async def create(self, user_id: int, payload: TrxRequest) -> Trx:
        """
        주문 생성

        상품 행을 잠근 뒤 재고를 확인하고, 주문 / 상품 스냅샷 / 주문 항목 / 재고 차감을
        하나의 트랜잭션으로 기록한다. 어느 단계든 실패하면 아무것도 남지 않는다.

        Args:
            user_id: 주문 회원 ID
            payload: 결제 방법, 배송지, 주문 항목

        Returns:
            생성된 주문

        Raises:
            BadRequestError: 입력 누락, 배송지/상품 없음, 재고 부족, 합계 범위 초과
        """
        if not payload.method_bayar or not payload.alamat_kirim:
            raise BadRequestError("method_bayar dan alamat_kirim wajib diisi")
        if not payload.detail_trx:
            raise BadRequestError("detail_trx tidak boleh kosong")

        try:
            alamat = None
            if 0 < payload.alamat_kirim <= MAX_INT:
                alamat = await self.alamat.get_for_user(user_id, payload.alamat_kirim)
            if alamat is None:
                raise BadRequestError("alamat_kirim tidak ditemukan")

            locked: Dict[int, Produk] = {}
            # 같은 상품이 여러 줄에 나오면 앞 줄 수량을 뺀 재고로 확인
            remaining: Dict[int, int] = {}
            logs: List[LogProduk] = []
            details: List[DetailTrx] = []
            total = 0

            for line in payload.detail_trx:
                if not line.product_id or line.product_id <= 0 or line.kuantitas <= 0:
                    raise BadRequestError("product_id dan kuantitas harus lebih dari 0")
                if line.product_id > MAX_INT:
                    raise BadRequestError("product tidak ditemukan")

                product = locked.get(line.product_id)
                if product is None:
                    product = await self.products.get_for_update(line.product_id)
                    if product is None:
                        raise BadRequestError("product tidak ditemukan")
                    locked[product.id] = product
                    remaining[product.id] = product.stok

                if remaining[product.id] < line.kuantitas:
                    raise BadRequestError("stok tidak cukup")
                remaining[product.id] -= line.kuantitas

                line_total = product.harga_konsumen * line.kuantitas
                total += line_total
                if total > MAX_BIGINT:
                    raise BadRequestError("harga_total terlalu besar")

                logs.append(
                    LogProduk(
                        produk_id=product.id,
                        nama_produk=product.nama_produk,
                        slug=product.slug,
                        harga_reseller=product.harga_reseller,
                        harga_konsumen=product.harga_konsumen,
                        deskripsi=product.deskripsi,
                        toko_id=product.toko_id,
                        category_id=product.category_id,
                    )
                )
                details.append(
                    DetailTrx(
                        toko_id=product.toko_id,
                        kuantitas=line.kuantitas,
                        harga_total=line_total,
                    )
                )

            for product_id, stok in remaining.items():
                locked[product_id].stok = stok

            trx = Trx(
                user_id=user_id,
                alamat_id=alamat.id,
                harga_total=total,
                kode_invoice=make_invoice_code(),
                method_bayar=payload.method_bayar,
            )
            await self.trx.create_with_details(trx, logs, details)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        global_metrics.increment("trx.created")
        logger.info(
            f"주문 생성: trx_id={trx.id}, user_id={user_id}, "
            f"items={len(details)}, harga_total={total}"
        )
        return trx
