from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import (
    DECIMAL,
    CheckConstraint,
    Index,
    Integer,
    String,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.config.constants import DEFAULT_PRODUCT_CATEGORY
from src.database.base import Base

if TYPE_CHECKING:
    from src.database.models.product_interaction import ProductInteraction


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="check_price_non_negative"),
        CheckConstraint("num_reviews >= 0", name="check_num_reviews_non_negative"),
        Index("idx_products_category", "category"),
        Index("idx_products_created_at", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    category: Mapped[str] = mapped_column(
        String(100), nullable=False, default=DEFAULT_PRODUCT_CATEGORY
    )
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False, default=0)
    # Review count doubles as the sales proxy on the insights dashboard
    num_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), server_default=text("NOW()"), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        server_default=text("NOW()"),
        onupdate=text("NOW()"),
        nullable=False,
    )

    interactions: Mapped[List["ProductInteraction"]] = relationship(
        "ProductInteraction",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
