from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base
from src.platform.types.identity import new_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductModel(Base):
    __tablename__ = 'product'
    __table_args__ = (
        # Listing order and the per-seller listing
        Index('ix_product_created_at_id', 'created_at', 'id'),
        Index('ix_product_seller_id_created_at', 'seller_id', 'created_at'),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    brand: Mapped[str] = mapped_column(String(60), nullable=False)
    category: Mapped[str] = mapped_column(String(60), nullable=False)
    price: Mapped[int] = mapped_column(BigInteger, nullable=False)  # minor units
    available_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    free_shipping: Mapped[bool] = mapped_column(Boolean, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str] = mapped_column(String(500), nullable=False)
    seller_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('user.id', ondelete='CASCADE'), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )

    def __repr__(self):
        return f'<ProductModel(id={self.id}, name={self.name}, seller_id={self.seller_id})>'
