import enum
from decimal import Decimal
from sqlalchemy import (
    ForeignKey,
    Index,
    Integer,
    Numeric,
    Enum as SQLEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.db.base import BaseModel


class OrderStatus(str, enum.Enum):
    """Order lifecycle status"""

    pending = "pending"
    confirmed = "confirmed"
    shipped = "shipped"
    delivered = "delivered"
    cancelled = "cancelled"


class Order(BaseModel):
    """
    Order placed by a retailer against one wholesaler.
    `total` is the sum of item price x quantity, fixed when the order is created.
    Extends BaseModel which provides: id, created_at, updated_at
    """

    __tablename__ = "orders"

    # Indexes backing the dashboard filters
    __table_args__ = (
        Index("idx_order_wholesaler_status", "wholesaler_id", "status"),
        Index("idx_order_retailer_created_at", "retailer_id", "created_at"),
    )

    wholesaler_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", name="fk_order_wholesaler_id"),
        nullable=False,
        index=True,
    )

    retailer_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", name="fk_order_retailer_id"),
        nullable=False,
        index=True,
    )

    total: Mapped[Decimal] = mapped_column(
        Numeric(precision=15, scale=2),
        nullable=False,
        default=0,
        server_default="0",
    )

    status: Mapped[OrderStatus] = mapped_column(
        SQLEnum(OrderStatus, name="order_status_enum", native_enum=False),
        nullable=False,
        default=OrderStatus.pending,
        server_default=OrderStatus.pending.value,
    )

    # Relationships
    items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OrderItem.id",
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, status={self.status.value}, total={self.total})>"


class OrderItem(BaseModel):
    """
    Order line item - product reference with the quantity and unit price at order time.
    """

    __tablename__ = "order_items"

    order_id: Mapped[int] = mapped_column(
        ForeignKey("orders.id", name="fk_order_item_order_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    product_id: Mapped[int] = mapped_column(
        ForeignKey("products.id", name="fk_order_item_product_id"),
        nullable=False,
        index=True,
    )

    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=15, scale=2),
        nullable=False,
    )

    # Relationships
    order: Mapped["Order"] = relationship("Order", back_populates="items")

    def __repr__(self) -> str:
        return f"<OrderItem(id={self.id}, product_id={self.product_id}, quantity={self.quantity})>"
