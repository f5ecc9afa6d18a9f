"""Customers and suppliers: the same person record under two tables."""
import logging

from sqlalchemy.orm import joinedload

from stockroom.errors import NotFoundError
from stockroom.models.party import Customer, Supplier
from stockroom.models.variant_supplier import VariantSupplier
from stockroom.services import unit_of_work
from stockroom.services.filters import (
    PARTY_SORT_FIELDS,
    SUPPLIER_VARIANT_SORT_FIELDS,
    build_search_filter,
    order_by_clause,
    resolve_sort,
)
from stockroom.services.pagination import paginate_query
from stockroom.services.text import capitalize

logger = logging.getLogger(__name__)


def normalize_party_fields(data: dict) -> dict:
    clean = dict(data)
    if clean.get("email"):
        clean["email"] = clean["email"].strip().lower()
    for field in ("first_name", "last_name"):
        if clean.get(field):
            clean[field] = capitalize(clean[field].strip().lower())
    if clean.get("company"):
        clean["company"] = capitalize(clean["company"].strip())
    return clean


class PartyService:
    model = None
    label = None
    list_key = None

    def __init__(self, session):
        self.session = session

    def _scoped(self, user_id):
        return self.session.query(self.model).filter(self.model.user_id == user_id)

    def _get_owned(self, user_id, party_id):
        party = self._scoped(user_id).filter(self.model.id == party_id).first()
        if party is None:
            raise NotFoundError(f"{self.label} with id {party_id} not found")
        return party

    def list(self, user_id, pagination, query):
        sort_by, sort_order = resolve_sort(
            query.get("sortBy"), query.get("sortOrder"), PARTY_SORT_FIELDS
        )
        base = self._scoped(user_id)
        search = build_search_filter(
            query.get("search"),
            [
                self.model.first_name,
                self.model.last_name,
                self.model.email,
                self.model.company,
            ],
        )
        if search is not None:
            base = base.filter(search)
        rows = base.order_by(
            order_by_clause(self.model, sort_by, sort_order), self.model.id
        )
        return paginate_query(
            rows, pagination, self.list_key, self.model.to_dict, count_query=base
        )

    def get(self, user_id, party_id):
        return self._get_owned(user_id, party_id).to_dict()

    def create(self, user_id, data: dict):
        data = normalize_party_fields(data)
        with unit_of_work(self.session):
            party = self.model(user_id=user_id, **data)
            self.session.add(party)
            self.session.flush()
        logger.info("Created %s %s for user %s", self.label.lower(), party.id, user_id)
        return party.to_dict()

    def update(self, user_id, party_id, data: dict):
        data = normalize_party_fields(data)
        with unit_of_work(self.session):
            party = self._get_owned(user_id, party_id)
            for field, value in data.items():
                setattr(party, field, value)
        return party.to_dict()

    def delete(self, user_id, party_id):
        with unit_of_work(self.session):
            party = self._get_owned(user_id, party_id)
            self.session.delete(party)
        logger.info("Deleted %s %s for user %s", self.label.lower(), party_id, user_id)


class CustomerService(PartyService):
    model = Customer
    label = "Customer"
    list_key = "customers"


class SupplierService(PartyService):
    model = Supplier
    label = "Supplier"
    list_key = "suppliers"

    def list_supplier_variants(self, user_id, supplier_id, pagination, query):
        """Variants bought from one supplier, with their purchase terms."""
        self._get_owned(user_id, supplier_id)
        sort_by, sort_order = resolve_sort(
            query.get("sortBy"), query.get("sortOrder"), SUPPLIER_VARIANT_SORT_FIELDS
        )
        base = self.session.query(VariantSupplier).filter_by(
            user_id=user_id, supplier_id=supplier_id
        )
        rows = base.options(joinedload(VariantSupplier.variant)).order_by(
            order_by_clause(VariantSupplier, sort_by, sort_order), VariantSupplier.id
        )
        return paginate_query(
            rows,
            pagination,
            "variants",
            lambda vs: vs.to_dict(include_variant=True),
            count_query=base,
        )
