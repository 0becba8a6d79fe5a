"""Product model."""
from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, Integer, Text, DateTime, ForeignKey, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.database import Base


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        # A flagged product always carries at least one remark
        CheckConstraint(
            "NOT is_flagged OR remarks IS NOT NULL",
            name="ck_products_flagged_has_remarks",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id"), nullable=False, index=True
    )
    brand_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("brands.id"), nullable=False, index=True
    )
    is_flagged: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(), index=True
    )
    # Comma-joined RemarkTag values, NULL when there are none
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    category = relationship("Category", back_populates="products")
    brand = relationship("Brand", back_populates="products")
    images = relationship(
        "ProductImage", back_populates="product", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} product_id={self.product_id} name={self.name!r}>"
