from datetime import datetime, timezone
from stockroom.extensions import db


class VariantSupplier(db.Model):
    __tablename__ = "variant_suppliers"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    variant_id = db.Column(
        db.Integer,
        db.ForeignKey("product_variants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    supplier_id = db.Column(
        db.Integer,
        db.ForeignKey("suppliers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    purchase_price = db.Column(db.Numeric(10, 2), nullable=False)
    is_primary_supplier = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        db.UniqueConstraint("variant_id", "supplier_id", name="uq_variant_supplier"),
    )

    def to_dict(self, include_variant=False):
        data = {
            "id": self.id,
            "variant_id": self.variant_id,
            "supplier_id": self.supplier_id,
            "purchase_price": float(self.purchase_price),
            "is_primary_supplier": self.is_primary_supplier,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_variant:
            data["variant"] = {
                "id": self.variant.id,
                "variant_name": self.variant.variant_name,
                "product_id": self.variant.product_id,
                "stock": self.variant.stock,
            }
        return data

    def __repr__(self):
        return f"<VariantSupplier variant={self.variant_id} supplier={self.supplier_id}>"
