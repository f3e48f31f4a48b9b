"""
상품 서비스
"""

from dataclasses import dataclass, fields
from typing import List, Optional, Sequence

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.domain.rules import MAX_HARGA, MAX_INT, make_slug
from marketplace.monitoring import get_logger, global_metrics
from marketplace.services.exceptions import BadRequestError, NotFoundError
from marketplace.services.uploads import remove_uploads, save_uploads
from marketplace.storage.categories import CategoryRepository
from marketplace.storage.products import ProductFilter, ProductRepository
from marketplace.storage.tables import FotoProduk, Produk, Toko
from marketplace.storage.users import TokoRepository

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "No Data Product"


@dataclass
class ProductForm:
    """상품 입력 폼 (multipart 문자열 그대로)"""

    nama_produk: Optional[str] = None
    category_id: Optional[str] = None
    harga_reseller: Optional[str] = None
    harga_konsumen: Optional[str] = None
    stok: Optional[str] = None
    deskripsi: Optional[str] = None


REQUIRED_FIELDS = ("nama_produk", "category_id", "harga_reseller", "harga_konsumen", "stok")

# 숫자 필드별 최소값
NUMERIC_MINIMUM = {
    "category_id": 1,
    "harga_reseller": 1,
    "harga_konsumen": 1,
    "stok": 0,
}

# 숫자 필드별 최대값
NUMERIC_MAXIMUM = {
    "category_id": MAX_INT,
    "harga_reseller": MAX_HARGA,
    "harga_konsumen": MAX_HARGA,
    "stok": MAX_INT,
}


def parse_number(value: str, field: str) -> int:
    """폼 문자열을 정수로 변환 (형식 오류/범위 오류는 invalid <field>)"""
    try:
        number = int(value.strip())
    except ValueError as e:
        raise BadRequestError(f"invalid {field}") from e
    if not NUMERIC_MINIMUM[field] <= number <= NUMERIC_MAXIMUM[field]:
        raise BadRequestError(f"invalid {field}")
    return number


class ProductService:
    """상품 등록/조회/수정/삭제"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.products = ProductRepository(session)
        self.categories = CategoryRepository(session)
        self.toko = TokoRepository(session)

    async def list(self, limit: int, page: int, filters: ProductFilter) -> List[Produk]:
        return await self.products.list(limit, page, filters)

    async def get(self, product_id: int) -> Produk:
        product = await self.products.get_detail(product_id)
        if product is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return product

    async def _require_category(self, category_id: int) -> None:
        if await self.categories.get(category_id) is None:
            raise BadRequestError("category tidak ditemukan")

    async def _toko_of(self, user_id: int) -> Optional[Toko]:
        return await self.toko.get_by_user(user_id)

    async def create(
        self, user_id: int, form: ProductForm, photos: Sequence[Optional[UploadFile]] = ()
    ) -> Produk:
        """
        상품 등록

        Args:
            user_id: 요청 회원 ID (상품은 이 회원의 상점에 등록)
            form: 입력 폼
            photos: 업로드 사진

        Returns:
            생성된 상품

        Raises:
            BadRequestError: 필수 값 누락, 숫자 형식 오류, 상점/카테고리 없음
        """
        missing = [field for field in REQUIRED_FIELDS if not (getattr(form, field) or "").strip()]
        if missing:
            raise BadRequestError(*[f"{field} wajib diisi" for field in missing])

        numbers = {field: parse_number(getattr(form, field), field) for field in NUMERIC_MINIMUM}

        toko = await self._toko_of(user_id)
        if toko is None:
            raise BadRequestError("toko not found for user")
        await self._require_category(numbers["category_id"])

        urls = await save_uploads(photos)
        nama = form.nama_produk.strip()
        product = Produk(
            nama_produk=nama,
            slug=make_slug(nama),
            harga_reseller=numbers["harga_reseller"],
            harga_konsumen=numbers["harga_konsumen"],
            stok=numbers["stok"],
            deskripsi=form.deskripsi,
            toko_id=toko.id,
            category_id=numbers["category_id"],
            foto_produk=[FotoProduk(url=url) for url in urls],
        )
        try:
            await self.products.add(product)
            await self.session.commit()
        except Exception:
            remove_uploads(urls)
            raise

        global_metrics.increment("products.created")
        logger.info(f"상품 등록: product_id={product.id}, toko_id={toko.id}, photos={len(urls)}")
        return product

    async def _get_own(self, user_id: int, product_id: int) -> Produk:
        toko = await self._toko_of(user_id)
        product = await self.products.get_for_toko(toko.id, product_id) if toko else None
        if product is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return product

    async def update(
        self,
        user_id: int,
        product_id: int,
        form: ProductForm,
        photos: Sequence[Optional[UploadFile]] = (),
    ) -> Produk:
        """
        내 상점 상품 부분 수정

        이름이 바뀌면 슬러그를 다시 만들고, 사진이 업로드되면 기존 사진을 모두 교체한다.
        """
        product = await self._get_own(user_id, product_id)

        for field in fields(ProductForm):
            value = getattr(form, field.name)
            if value is None or not value.strip():
                continue

            if field.name == "nama_produk":
                product.nama_produk = value.strip()
                product.slug = make_slug(value)
            elif field.name == "deskripsi":
                product.deskripsi = value
            else:
                number = parse_number(value, field.name)
                if field.name == "category_id":
                    await self._require_category(number)
                setattr(product, field.name, number)

        urls = await save_uploads(photos)
        replaced = [photo.url for photo in product.foto_produk] if urls else []
        try:
            if urls:
                await self.products.replace_photos(product, urls)
            await self.products.save(product)
            await self.session.commit()
        except Exception:
            remove_uploads(urls)
            raise

        # 교체된 사진 파일은 커밋 후에 삭제
        remove_uploads(replaced)
        logger.info(f"상품 수정: product_id={product.id}, replaced_photos={len(replaced)}")
        return product

    async def delete(self, user_id: int, product_id: int) -> None:
        """내 상점 상품 삭제 (사진 행과 파일 삭제, 주문 스냅샷은 유지)"""
        product = await self._get_own(user_id, product_id)
        photo_files = [photo.url for photo in product.foto_produk]
        await self.products.delete(product)
        await self.session.commit()

        remove_uploads(photo_files)
        logger.info(f"상품 삭제: product_id={product_id}, photos={len(photo_files)}")
