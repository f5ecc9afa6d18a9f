from datetime import datetime, timezone
from stockroom.extensions import db


class ProductVariant(db.Model):
    __tablename__ = "product_variants"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id = db.Column(
        db.Integer,
        db.ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    variant_name = db.Column(db.String(50), nullable=False)
    stock = db.Column(db.Integer, nullable=False, default=0)
    selling_price_modifier = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    min_stock_alert = db.Column(db.Integer, nullable=False, default=0)
    enable_stock_alerts = db.Column(db.Boolean, nullable=False, default=False)
    is_default = db.Column(db.Boolean, nullable=False, default=False)
    attributes = db.Column(db.JSON)  # {"size": "L", "color": "red"}
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    suppliers = db.relationship(
        "VariantSupplier",
        backref="variant",
        lazy="select",
        cascade="all, delete-orphan",
    )

    # At most one default variant per product
    __table_args__ = (
        db.Index(
            "uq_product_variants_default",
            "product_id",
            unique=True,
            postgresql_where=db.text("is_default"),
            sqlite_where=db.text("is_default"),
        ),
    )

    DEFAULT_NAME = "Default"

    def to_dict(self):
        return {
            "id": self.id,
            "product_id": self.product_id,
            "variant_name": self.variant_name,
            "stock": self.stock,
            "selling_price_modifier": float(self.selling_price_modifier or 0),
            "min_stock_alert": self.min_stock_alert,
            "enable_stock_alerts": self.enable_stock_alerts,
            "is_default": self.is_default,
            "attributes": self.attributes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Variant {self.id}: {self.variant_name}>"
