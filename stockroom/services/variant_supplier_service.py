import logging

from stockroom.errors import BadRequestError, NotFoundError
from stockroom.models.party import Supplier
from stockroom.models.variant import ProductVariant
from stockroom.models.variant_supplier import VariantSupplier
from stockroom.services import unit_of_work

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("purchase_price", "is_primary_supplier")


class VariantSupplierService:
    """Which supplier sells which variant, and at what price."""

    def __init__(self, session):
        self.session = session

    def _get_owned(self, user_id, variant_supplier_id):
        row = (
            self.session.query(VariantSupplier)
            .filter_by(user_id=user_id, id=variant_supplier_id)
            .first()
        )
        if row is None:
            raise NotFoundError(
                f"Variant Supplier with id {variant_supplier_id} not found"
            )
        return row

    def _check_owned(self, model, label, user_id, object_id):
        exists = (
            self.session.query(model.id).filter_by(user_id=user_id, id=object_id).first()
        )
        if exists is None:
            raise NotFoundError(f"{label} with id {object_id} not found")

    def get(self, user_id, variant_supplier_id):
        return self._get_owned(user_id, variant_supplier_id).to_dict(include_variant=True)

    def create(self, user_id, data: dict):
        with unit_of_work(self.session):
            self._check_owned(ProductVariant, "Variant", user_id, data["variant_id"])
            self._check_owned(Supplier, "Supplier", user_id, data["supplier_id"])
            row = VariantSupplier(user_id=user_id, **data)
            self.session.add(row)
            self.session.flush()
        logger.info(
            "Linked variant %s to supplier %s for user %s",
            row.variant_id, row.supplier_id, user_id,
        )
        return row.to_dict()

    def update(self, user_id, variant_supplier_id, data: dict):
        changes = {
            k: v for k, v in data.items() if k in UPDATABLE_FIELDS and v is not None
        }
        if not changes:
            raise BadRequestError("No data to update")
        with unit_of_work(self.session):
            row = self._get_owned(user_id, variant_supplier_id)
            for field, value in changes.items():
                setattr(row, field, value)
        return row.to_dict()

    def delete(self, user_id, variant_supplier_id):
        with unit_of_work(self.session):
            row = self._get_owned(user_id, variant_supplier_id)
            self.session.delete(row)
        logger.info("Deleted variant supplier %s for user %s", variant_supplier_id, user_id)
