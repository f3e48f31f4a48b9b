"""
응답 데이터 변환
ORM 레코드를 API 응답용 dict 로 변환한다.
"""

from typing import Any, Dict, List, Optional

from marketplace.domain.rules import format_tanggal
from marketplace.storage.tables import (
    Alamat,
    Category,
    DetailTrx,
    FotoProduk,
    LogProduk,
    Produk,
    Toko,
    Trx,
    User,
)


def user_payload(user: User, with_id: bool = True) -> Dict[str, Any]:
    data = {
        "nama": user.nama,
        "no_telp": user.no_telp,
        "tanggal_Lahir": format_tanggal(user.tanggal_lahir),
        "jenis_kelamin": user.jenis_kelamin,
        "tentang": user.tentang,
        "pekerjaan": user.pekerjaan,
        "email": user.email,
        "id_provinsi": user.id_provinsi,
        "id_kota": user.id_kota,
    }
    if with_id:
        data = {"id": user.id, **data}
    return data


def toko_payload(toko: Optional[Toko]) -> Optional[Dict[str, Any]]:
    if toko is None:
        return None
    return {"id": toko.id, "nama_toko": toko.nama_toko, "url_foto": toko.url_foto}


def alamat_payload(alamat: Alamat) -> Dict[str, Any]:
    return {
        "id": alamat.id,
        "judul_alamat": alamat.judul_alamat,
        "nama_penerima": alamat.nama_penerima,
        "no_telp": alamat.no_telp,
        "detail_alamat": alamat.detail_alamat,
    }


def category_payload(category: Optional[Category]) -> Optional[Dict[str, Any]]:
    if category is None:
        return None
    return {"id": category.id, "nama_category": category.nama}


def photo_payload(photo: FotoProduk) -> Dict[str, Any]:
    return {"id": photo.id, "product_id": photo.produk_id, "url": photo.url}


def product_payload(product: Produk) -> Dict[str, Any]:
    """
    상품 응답

    가격 키 "harga_reseler" 는 공개된 API 응답 형식을 그대로 따른다.
    """
    return {
        "id": product.id,
        "nama_produk": product.nama_produk,
        "slug": product.slug,
        "harga_reseler": product.harga_reseller,
        "harga_konsumen": product.harga_konsumen,
        "stok": product.stok,
        "deskripsi": product.deskripsi,
        "toko": toko_payload(product.toko),
        "category": category_payload(product.category),
        "photos": [photo_payload(photo) for photo in product.foto_produk],
    }


def snapshot_payload(log: LogProduk) -> Dict[str, Any]:
    """주문 시점 상품 스냅샷 (사진은 현재 상품 기준, 삭제된 상품이면 빈 목록)"""
    photos: List[Dict[str, Any]] = []
    if log.produk is not None:
        photos = [photo_payload(photo) for photo in log.produk.foto_produk]

    return {
        "id": log.produk_id,
        "nama_produk": log.nama_produk,
        "slug": log.slug,
        "harga_reseler": log.harga_reseller,
        "harga_konsumen": log.harga_konsumen,
        "deskripsi": log.deskripsi,
        "toko": {"nama_toko": log.toko.nama_toko, "url_foto": log.toko.url_foto},
        "category": category_payload(log.category),
        "photos": photos,
    }


def detail_trx_payload(detail: DetailTrx) -> Dict[str, Any]:
    return {
        "product": snapshot_payload(detail.log_produk),
        "toko": toko_payload(detail.toko),
        "kuantitas": detail.kuantitas,
        "harga_total": detail.harga_total,
    }


def trx_payload(trx: Trx) -> Dict[str, Any]:
    return {
        "id": trx.id,
        "harga_total": trx.harga_total,
        "kode_invoice": trx.kode_invoice,
        "method_bayar": trx.method_bayar,
        "alamat_kirim": alamat_payload(trx.alamat),
        "detail_trx": [detail_trx_payload(detail) for detail in trx.detail_trx],
    }


def page_payload(items: List[Dict[str, Any]], limit: int, page: int) -> Dict[str, Any]:
    """목록 응답 (page / limit / data)"""
    return {"page": page, "limit": limit, "data": items}
