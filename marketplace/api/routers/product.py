"""
상품 API
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.api.dependencies import (
    CurrentUser,
    Pagination,
    get_current_user,
    parse_optional_int,
)
from marketplace.api.responses import success
from marketplace.models.payloads import page_payload, product_payload
from marketplace.monitoring import get_logger
from marketplace.services.products import ProductForm, ProductService
from marketplace.storage.database import get_db
from marketplace.storage.products import ProductFilter

logger = get_logger(__name__)

router = APIRouter()


@router.get("")
async def list_products(
    request: Request,
    nama_produk: Optional[str] = Query(None, description="상품명 검색어"),
    category_id: Optional[str] = Query(None),
    toko_id: Optional[str] = Query(None),
    min_harga: Optional[str] = Query(None, description="최소 소비자 가격"),
    max_harga: Optional[str] = Query(None, description="최대 소비자 가격"),
    pagination: Pagination = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """상품 목록 (공개, 숫자가 아닌 필터는 무시)"""
    filters = ProductFilter(
        nama_produk=nama_produk,
        category_id=parse_optional_int(category_id),
        toko_id=parse_optional_int(toko_id),
        min_harga=parse_optional_int(min_harga),
        max_harga=parse_optional_int(max_harga),
    )
    records = await ProductService(session).list(pagination.limit, pagination.page, filters)
    return success(
        request,
        page_payload([product_payload(p) for p in records], pagination.limit, pagination.page),
    )


@router.get("/{product_id}")
async def get_product(request: Request, product_id: int, session: AsyncSession = Depends(get_db)):
    """상품 상세 (공개)"""
    product = await ProductService(session).get(product_id)
    return success(request, product_payload(product))


@router.post("")
async def create_product(
    request: Request,
    nama_produk: Optional[str] = Form(None),
    category_id: Optional[str] = Form(None),
    harga_reseller: Optional[str] = Form(None),
    harga_konsumen: Optional[str] = Form(None),
    stok: Optional[str] = Form(None),
    deskripsi: Optional[str] = Form(None),
    photos: Optional[List[UploadFile]] = File(None),
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """상품 등록 (multipart)"""
    form = ProductForm(
        nama_produk=nama_produk,
        category_id=category_id,
        harga_reseller=harga_reseller,
        harga_konsumen=harga_konsumen,
        stok=stok,
        deskripsi=deskripsi,
    )
    product = await ProductService(session).create(user.id, form, photos or [])
    return success(request, product.id)


@router.put("/{product_id}")
async def update_product(
    request: Request,
    product_id: int,
    nama_produk: Optional[str] = Form(None),
    category_id: Optional[str] = Form(None),
    harga_reseller: Optional[str] = Form(None),
    harga_konsumen: Optional[str] = Form(None),
    stok: Optional[str] = Form(None),
    deskripsi: Optional[str] = Form(None),
    photos: Optional[List[UploadFile]] = File(None),
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    """내 상품 수정 (사진을 올리면 기존 사진 전부 교체)"""
    form = ProductForm(
        nama_produk=nama_produk,
        category_id=category_id,
        harga_reseller=harga_reseller,
        harga_konsumen=harga_konsumen,
        stok=stok,
        deskripsi=deskripsi,
    )
    await ProductService(session).update(user.id, product_id, form, photos or [])
    return success(request, "")


@router.delete("/{product_id}")
async def delete_product(
    request: Request,
    product_id: int,
    user: CurrentUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
):
    await ProductService(session).delete(user.id, product_id)
    return success(request, "")
