from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Index, Integer, String, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.database.base import Base

if TYPE_CHECKING:
    from src.database.models.product import Product


class ProductInteraction(Base):
    """
    A logged shopper action against a product.

    Tracks: view, click, add-to-cart, purchase. Rows are append-only and are
    read in full by the insights report.
    """

    __tablename__ = "product_interactions"
    __table_args__ = (
        Index("idx_product_interactions_type_time", "interaction_type", "timestamp"),
        Index("idx_product_interactions_product_type", "product_id", "interaction_type"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False
    )

    # Firebase UID, absent for guest or session-only events
    user_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # One of InteractionType values
    interaction_type: Mapped[str] = mapped_column(String(50), nullable=False)

    timestamp: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    )

    session_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    product: Mapped["Product"] = relationship("Product", back_populates="interactions")
