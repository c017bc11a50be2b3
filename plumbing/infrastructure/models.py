"""SQLAlchemy models for the plumbing catalog.

Defines every persistent table: reference data (languages, users),
localized catalog entities, media and marketing records.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from plumbing.infrastructure.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# Association Tables
# ============================================================================


catalog_colors = Table(
    "catalog_colors",
    Base.metadata,
    Column("catalog_id", Integer, ForeignKey("catalogs.id", ondelete="CASCADE"), primary_key=True),
    Column("color_id", Integer, ForeignKey("colors.id", ondelete="CASCADE"), primary_key=True),
)

collection_photos = Table(
    "collection_photos",
    Base.metadata,
    Column(
        "collection_id",
        Integer,
        ForeignKey("collections.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("photo_id", Integer, ForeignKey("photos.id", ondelete="CASCADE"), primary_key=True),
)

item_photos = Table(
    "item_photos",
    Base.metadata,
    Column("item_id", Integer, ForeignKey("items.id", ondelete="CASCADE"), primary_key=True),
    Column("photo_id", Integer, ForeignKey("photos.id", ondelete="CASCADE"), primary_key=True),
)


# ============================================================================
# Reference Data
# ============================================================================


class Language(Base):
    """Supported content language.

    Attributes:
        id: Surrogate key, referenced by catalog localizations.
        code: Short code (``ru``, ``kgz``, ``en``), referenced by translations.
        name: Display name in the language itself.
    """

    __tablename__ = "languages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(10), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<Language(code={self.code})>"


class User(Base):
    """Administrator account able to mutate the catalog."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<User(id={self.id}, username={self.username})>"


# ============================================================================
# Catalogs
# ============================================================================


class Color(Base):
    """Named color swatch shared between catalogs.

    Attributes:
        id: Surrogate key.
        name: Color name, e.g. "White".
        hash_color: Hex value, e.g. "#FFFFFF".
    """

    __tablename__ = "colors"
    __table_args__ = (UniqueConstraint("name", "hash_color", name="uq_colors_name_hash"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    hash_color: Mapped[str] = mapped_column(String(20), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<Color(id={self.id}, hash_color={self.hash_color})>"


class Catalog(Base):
    """Purchasable product definition.

    Attributes:
        id: Surrogate key.
        price: Base price.
        localizations: Per-language name and description.
        colors: Colors the product is offered in.
    """

    __tablename__ = "catalogs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    # Relationships
    localizations: Mapped[list["CatalogLocalization"]] = relationship(
        "CatalogLocalization",
        back_populates="catalog",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    colors: Mapped[list["Color"]] = relationship(
        "Color",
        secondary=catalog_colors,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Catalog(id={self.id}, price={self.price})>"


class CatalogLocalization(Base):
    """Catalog name and description in one language."""

    __tablename__ = "catalog_localizations"
    __table_args__ = (
        UniqueConstraint("catalog_id", "language_id", name="uq_catalog_localizations_language"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    catalog_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("catalogs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    language_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("languages.id"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Relationships
    catalog: Mapped["Catalog"] = relationship("Catalog", back_populates="localizations")
    language: Mapped["Language"] = relationship("Language", lazy="selectin")

    def __repr__(self) -> str:
        """String representation."""
        return f"<CatalogLocalization(catalog_id={self.catalog_id}, name={self.name})>"


# ============================================================================
# Categories
# ============================================================================


class Category(Base):
    """Top-level grouping of items."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    translations: Mapped[list["CategoryTranslation"]] = relationship(
        "CategoryTranslation",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id})>"


class CategoryTranslation(Base):
    """Category name in one language."""

    __tablename__ = "category_translations"

    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    )
    language_code: Mapped[str] = mapped_column(
        String(10),
        ForeignKey("languages.code"),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)


# ============================================================================
# Photos
# ============================================================================


class Photo(Base):
    """Uploaded image attached to a collection or an item.

    Attributes:
        id: Surrogate key.
        url: Path relative to the public base URL, e.g. "media/images/a_1700000000.png".
        is_main: Whether this is the cover photo.
        hash_color: Color of the product shown on the photo.
    """

    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    is_main: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    hash_color: Mapped[str] = mapped_column(String(20), nullable=False, default="")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Photo(id={self.id}, url={self.url})>"


# ============================================================================
# Collections & Items
# ============================================================================


class Collection(Base):
    """A grouping of items sold together.

    Attributes:
        id: Surrogate key.
        price: Base price.
        is_producer: Made by the store's own production.
        is_painted: Offered painted.
        is_popular: Shown in popular listings.
        is_new: Shown in new arrivals.
        translations: Per-language name and description.
        photos: Attached photos.
    """

    __tablename__ = "collections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    is_producer: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_painted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_popular: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    is_new: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)

    # Relationships
    translations: Mapped[list["CollectionTranslation"]] = relationship(
        "CollectionTranslation",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    photos: Mapped[list["Photo"]] = relationship(
        "Photo",
        secondary=collection_photos,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Collection(id={self.id}, price={self.price})>"


class CollectionTranslation(Base):
    """Collection name and description in one language."""

    __tablename__ = "collection_translations"

    collection_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("collections.id", ondelete="CASCADE"),
        primary_key=True,
    )
    language_code: Mapped[str] = mapped_column(
        String(10),
        ForeignKey("languages.code"),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")


class Item(Base):
    """Single sellable product within a collection.

    Attributes:
        id: Surrogate key.
        category_id: Owning category.
        collection_id: Owning collection.
        size: Free-form size label.
        price: Base price.
        is_producer: Made by the store's own production.
        is_painted: Offered painted.
        is_popular: Shown in popular listings.
        is_new: Shown in new arrivals.
    """

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=False,
        index=True,
    )
    collection_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("collections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    size: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    is_producer: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_painted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_popular: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    is_new: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)

    # Relationships
    translations: Mapped[list["ItemTranslation"]] = relationship(
        "ItemTranslation",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    photos: Mapped[list["Photo"]] = relationship(
        "Photo",
        secondary=item_photos,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Item(id={self.id}, collection_id={self.collection_id})>"


class ItemTranslation(Base):
    """Item name and description in one language."""

    __tablename__ = "item_translations"

    item_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("items.id", ondelete="CASCADE"),
        primary_key=True,
    )
    language_code: Mapped[str] = mapped_column(
        String(10),
        ForeignKey("languages.code"),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")


# ============================================================================
# Brands, Vacancies, Reviews, Discounts
# ============================================================================


class Brand(Base):
    """Partner brand with a logo."""

    __tablename__ = "brands"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    url: Mapped[str] = mapped_column(String(1000), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<Brand(id={self.id}, name={self.name})>"


class Vacancy(Base):
    """Open position published on the site."""

    __tablename__ = "vacancies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    salary: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    translations: Mapped[list["VacancyTranslation"]] = relationship(
        "VacancyTranslation",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Vacancy(id={self.id}, is_active={self.is_active})>"


class VacancyTranslation(Base):
    """Vacancy text in one language.

    The list columns hold bullet points in display order.
    """

    __tablename__ = "vacancy_translations"

    vacancy_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("vacancies.id", ondelete="CASCADE"),
        primary_key=True,
    )
    language_code: Mapped[str] = mapped_column(
        String(10),
        ForeignKey("languages.code"),
        primary_key=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    requirements: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    responsibilities: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    conditions: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    information: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)


class Review(Base):
    """Customer review, shown publicly until an administrator hides it."""

    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    is_show: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Review(id={self.id}, rating={self.rating})>"


class Discount(Base):
    """Time-boxed percentage discount on a collection or an item.

    Attributes:
        discount_type: "collection" or "item".
        target_id: Id of the discounted collection or item.
        discount_percentage: Reduction in percent.
        start_date: First moment the discount applies.
        end_date: Last moment the discount applies.
    """

    __tablename__ = "discounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    discount_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    target_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    discount_percentage: Mapped[float] = mapped_column(Float, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<Discount(id={self.id}, type={self.discount_type}, "
            f"target_id={self.target_id}, percentage={self.discount_percentage})>"
        )
