from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text

from shopfront.db.base import Base, TimestampMixin


class Product(Base, TimestampMixin):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True)
    sku = Column(String(100), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    main_image_url = Column(String(1024), nullable=True)
    category = Column(String(100), nullable=True)
    status = Column(String(50), nullable=True)


class ProductTranslation(Base):
    """One row per (product, language); text columns are overwritten as a whole on update"""

    __tablename__ = "product_translations"

    product_id = Column(String(36), ForeignKey("products.id", ondelete="CASCADE"), primary_key=True)
    language_id = Column(Integer, ForeignKey("languages.id", ondelete="CASCADE"), primary_key=True)
    name = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    slug = Column(String(255), nullable=True, index=True)
