from stockroom.models.party import Customer, Supplier
from stockroom.models.product import Product
from stockroom.models.variant import ProductVariant


class StatsService:
    def __init__(self, session):
        self.session = session

    def inventory_stats(self, user_id):
        total_products = self.session.query(Product).filter_by(user_id=user_id).count()
        out_of_stock = (
            self.session.query(ProductVariant)
            .filter_by(user_id=user_id, stock=0)
            .count()
        )
        low_stock = (
            self.session.query(ProductVariant)
            .filter(
                ProductVariant.user_id == user_id,
                ProductVariant.enable_stock_alerts.is_(True),
                ProductVariant.stock > 0,
                ProductVariant.stock <= ProductVariant.min_stock_alert,
            )
            .count()
        )
        return {
            "totalProducts": total_products,
            "lowStockAlerts": low_stock,
            "outOfStockVariants": out_of_stock,
        }

    def agenda_stats(self, user_id):
        return {
            "totalSuppliers": self.session.query(Supplier).filter_by(user_id=user_id).count(),
            "totalCustomers": self.session.query(Customer).filter_by(user_id=user_id).count(),
        }
