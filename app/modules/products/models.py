from decimal import Decimal
from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db.base import BaseModel


class Product(BaseModel):
    """
    Product model - owned by exactly one wholesaler.
    Stock is decremented by order fulfilment elsewhere; dashboards only read it.
    """

    __tablename__ = "products"

    __table_args__ = (
        Index("idx_product_wholesaler_stock", "wholesaler_id", "stock"),
        CheckConstraint("stock >= 0", name="ck_product_stock_non_negative"),
    )

    wholesaler_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", name="fk_product_wholesaler_id"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=15, scale=2),
        nullable=False,
        default=0,
        server_default="0",
    )

    stock: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', stock={self.stock})>"
