import enum
from sqlalchemy import String, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db.base import BaseModel


class Role(str, enum.Enum):
    """User role enum"""

    WHOLESALER = "wholesaler"
    RETAILER = "retailer"


class User(BaseModel):
    """
    User model. Accounts are created by the registration service; the dashboards
    only use the id as an opaque owner reference on products and orders.
    Extends BaseModel which provides: id, created_at, updated_at
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )

    role: Mapped[Role] = mapped_column(
        SQLEnum(
            Role,
            name="users_role_enum",
            native_enum=False,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=Role.RETAILER,
        server_default=Role.RETAILER.value,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role={self.role.value})>"
