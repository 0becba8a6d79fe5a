"""Product image model -- object-store references for product photos."""
from sqlalchemy import Boolean, Integer, Text, ForeignKey, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.database import Base


class ProductImage(Base):
    __tablename__ = "product_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Object key inside the image bucket, e.g. "products/101/front.jpg"
    storage_path: Mapped[str] = mapped_column(Text, nullable=False)
    is_thumbnail: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    product = relationship("Product", back_populates="images")

    def __repr__(self) -> str:
        return f"<ProductImage id={self.id} path={self.storage_path!r}>"
