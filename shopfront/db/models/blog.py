from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from shopfront.db.base import Base, TimestampMixin


class BlogPost(Base, TimestampMixin):
    __tablename__ = "blog_posts"

    id = Column(String(36), primary_key=True)
    author_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    main_image_url = Column(String(1024), nullable=True)
    published_at = Column(DateTime(timezone=True), nullable=True, index=True)
    is_published = Column(Boolean, nullable=False, default=False)


class BlogPostTranslation(Base):
    __tablename__ = "blog_post_translations"

    blog_post_id = Column(String(36), ForeignKey("blog_posts.id", ondelete="CASCADE"), primary_key=True)
    language_id = Column(Integer, ForeignKey("languages.id", ondelete="CASCADE"), primary_key=True)
    title = Column(String(255), nullable=True)
    content = Column(Text, nullable=True)
    slug = Column(String(255), nullable=True, index=True)
