from datetime import datetime, timezone
from stockroom.extensions import db
from stockroom.services.stock import compute_total_stock


class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(50), nullable=False)
    description = db.Column(db.String(200))
    selling_price = db.Column(db.Numeric(10, 2), nullable=False)
    category_id = db.Column(
        db.Integer,
        db.ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    category = db.relationship("Category", lazy="joined")
    variants = db.relationship(
        "ProductVariant",
        backref="product",
        lazy="select",
        cascade="all, delete-orphan",
        order_by="[ProductVariant.is_default.desc(), ProductVariant.id]",
    )

    @property
    def default_variant(self):
        return next((v for v in self.variants if v.is_default), None)

    @property
    def total_stock(self):
        return compute_total_stock(self.variants)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "selling_price": float(self.selling_price),
            "category": (
                {"id": self.category.id, "name": self.category.name}
                if self.category
                else None
            ),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "variants": [v.to_dict() for v in self.variants],
            "total_stock": self.total_stock,
        }

    def __repr__(self):
        return f"<Product {self.id}: {self.name}>"
