"""
SQLAlchemy ORM 테이블 정의
user / toko / alamat / category / produk / foto_produk / trx / log_produk / detail_trx
"""

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import (
    BigInteger,
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """모든 테이블의 기본 클래스"""

    pass


class TimestampMixin:
    """생성/수정 시각 컬럼"""

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.now, onupdate=datetime.now
    )


class User(TimestampMixin, Base):
    """회원"""

    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nama: Mapped[str] = mapped_column(String(255), nullable=False)
    kata_sandi: Mapped[str] = mapped_column(String(255), nullable=False)
    no_telp: Mapped[str] = mapped_column("notelp", String(255), unique=True, nullable=False)
    tanggal_lahir: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    jenis_kelamin: Mapped[Optional[str]] = mapped_column(String(255))
    tentang: Mapped[Optional[str]] = mapped_column(Text)
    pekerjaan: Mapped[Optional[str]] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    id_provinsi: Mapped[Optional[str]] = mapped_column(String(255))
    id_kota: Mapped[Optional[str]] = mapped_column(String(255))
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    toko: Mapped[Optional["Toko"]] = relationship(back_populates="user", uselist=False)
    alamat: Mapped[List["Alamat"]] = relationship(back_populates="user")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, no_telp={self.no_telp}, is_admin={self.is_admin})>"


class Toko(TimestampMixin, Base):
    """회원 소유 상점 (회원당 1개)"""

    __tablename__ = "toko"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        "id_user", ForeignKey("user.id"), unique=True, nullable=False
    )
    nama_toko: Mapped[str] = mapped_column(String(255), nullable=False)
    url_foto: Mapped[Optional[str]] = mapped_column(String(255))

    user: Mapped["User"] = relationship(back_populates="toko")

    def __repr__(self) -> str:
        return f"<Toko(id={self.id}, user_id={self.user_id}, nama_toko={self.nama_toko})>"


class Alamat(TimestampMixin, Base):
    """배송지 주소"""

    __tablename__ = "alamat"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column("id_user", ForeignKey("user.id"), nullable=False, index=True)
    judul_alamat: Mapped[str] = mapped_column(String(255), nullable=False)
    nama_penerima: Mapped[str] = mapped_column(String(255), nullable=False)
    no_telp: Mapped[str] = mapped_column(String(255), nullable=False)
    detail_alamat: Mapped[str] = mapped_column(String(255), nullable=False)

    user: Mapped["User"] = relationship(back_populates="alamat")


class Category(TimestampMixin, Base):
    """상품 카테고리"""

    __tablename__ = "category"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nama: Mapped[str] = mapped_column("nama_category", String(255), nullable=False)


class Produk(TimestampMixin, Base):
    """상품"""

    __tablename__ = "produk"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nama_produk: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False)
    harga_reseller: Mapped[int] = mapped_column(BigInteger, nullable=False)
    harga_konsumen: Mapped[int] = mapped_column(BigInteger, nullable=False)
    stok: Mapped[int] = mapped_column(Integer, nullable=False)
    deskripsi: Mapped[Optional[str]] = mapped_column(Text)
    toko_id: Mapped[int] = mapped_column("id_toko", ForeignKey("toko.id"), nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(
        "id_category", ForeignKey("category.id"), nullable=False, index=True
    )

    toko: Mapped["Toko"] = relationship()
    category: Mapped["Category"] = relationship()
    foto_produk: Mapped[List["FotoProduk"]] = relationship(
        back_populates="produk", cascade="all, delete-orphan", order_by="FotoProduk.id"
    )
    # 상품이 삭제되어도 주문 스냅샷은 남는다 (id_produk -> NULL)
    log_produk: Mapped[List["LogProduk"]] = relationship(back_populates="produk")


class FotoProduk(TimestampMixin, Base):
    """상품 사진"""

    __tablename__ = "foto_produk"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    produk_id: Mapped[int] = mapped_column(
        "id_produk", ForeignKey("produk.id", ondelete="CASCADE"), nullable=False, index=True
    )
    url: Mapped[str] = mapped_column(String(255), nullable=False)

    produk: Mapped["Produk"] = relationship(back_populates="foto_produk")


class Trx(TimestampMixin, Base):
    """주문"""

    __tablename__ = "trx"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column("id_user", ForeignKey("user.id"), nullable=False, index=True)
    alamat_id: Mapped[int] = mapped_column(
        "alamat_pengiriman", ForeignKey("alamat.id"), nullable=False
    )
    harga_total: Mapped[int] = mapped_column(BigInteger, nullable=False)
    kode_invoice: Mapped[str] = mapped_column(String(255), nullable=False)
    method_bayar: Mapped[str] = mapped_column(String(255), nullable=False)

    alamat: Mapped["Alamat"] = relationship()
    detail_trx: Mapped[List["DetailTrx"]] = relationship(
        back_populates="trx", order_by="DetailTrx.id"
    )


class LogProduk(TimestampMixin, Base):
    """주문 시점 상품 스냅샷"""

    __tablename__ = "log_produk"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    produk_id: Mapped[Optional[int]] = mapped_column(
        "id_produk", ForeignKey("produk.id", ondelete="SET NULL"), nullable=True
    )
    nama_produk: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False)
    harga_reseller: Mapped[int] = mapped_column(BigInteger, nullable=False)
    harga_konsumen: Mapped[int] = mapped_column(BigInteger, nullable=False)
    deskripsi: Mapped[Optional[str]] = mapped_column(Text)
    toko_id: Mapped[int] = mapped_column("id_toko", ForeignKey("toko.id"), nullable=False)
    category_id: Mapped[int] = mapped_column("id_category", ForeignKey("category.id"), nullable=False)

    produk: Mapped[Optional["Produk"]] = relationship(back_populates="log_produk")
    toko: Mapped["Toko"] = relationship()
    category: Mapped["Category"] = relationship()


class DetailTrx(TimestampMixin, Base):
    """주문 항목"""

    __tablename__ = "detail_trx"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trx_id: Mapped[int] = mapped_column("id_trx", ForeignKey("trx.id"), nullable=False, index=True)
    log_produk_id: Mapped[int] = mapped_column(
        "id_log_produk", ForeignKey("log_produk.id"), nullable=False
    )
    toko_id: Mapped[int] = mapped_column("id_toko", ForeignKey("toko.id"), nullable=False)
    kuantitas: Mapped[int] = mapped_column(Integer, nullable=False)
    harga_total: Mapped[int] = mapped_column(BigInteger, nullable=False)

    trx: Mapped["Trx"] = relationship(back_populates="detail_trx")
    log_produk: Mapped["LogProduk"] = relationship()
    toko: Mapped["Toko"] = relationship()
