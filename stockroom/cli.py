"""Flask CLI commands for admin operations."""
import click


def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        from stockroom.extensions import db

        db.create_all()
        click.echo("Database initialized.")

    @app.cli.command("create-user")
    @click.argument("email")
    @click.option("--first-name", default="")
    @click.option("--last-name", default="")
    @click.option("--business-name", default=None)
    def create_user(email, first_name, last_name, business_name):
        """Create a user and print an access token for it."""
        from stockroom.auth import create_access_token
        from stockroom.extensions import db
        from stockroom.models.user import User

        email = email.strip().lower()
        if User.query.filter_by(email=email).first():
            raise click.ClickException(f"User {email} already exists")

        user = User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            business_name=business_name,
        )
        db.session.add(user)
        db.session.commit()
        click.echo(f"Created user {user.id}: {email}")
        click.echo(create_access_token(user.id))

    @app.cli.command("issue-token")
    @click.argument("email")
    def issue_token(email):
        """Print a fresh access token for an existing user."""
        from stockroom.auth import create_access_token
        from stockroom.models.user import User

        user = User.query.filter_by(email=email.strip().lower()).first()
        if not user:
            raise click.ClickException(f"No user with email {email}")
        click.echo(create_access_token(user.id))

    @app.cli.command("create-product")
    @click.option("--user-id", required=True, type=int)
    @click.option("--name", required=True)
    @click.option("--price", required=True, type=str, help="Selling price")
    @click.option("--category-id", default=None, type=int)
    @click.option("--stock", default=0, type=int)
    def create_product(user_id, name, price, category_id, stock):
        """Create a product (and its default variant) directly."""
        from decimal import Decimal

        from stockroom.extensions import db
        from stockroom.services.product_service import ProductService

        product = ProductService(db.session).create_product(
            user_id,
            {
                "name": name,
                "selling_price": Decimal(price),
                "category_id": category_id,
                "stock": stock,
            },
        )
        click.echo(
            f"Created product {product['id']}: {product['name']}, "
            f"stock {product['total_stock']}"
        )

    @app.cli.command("stats")
    @click.argument("user_id", type=int)
    def stats(user_id):
        """Show inventory statistics for one user."""
        from stockroom.extensions import db
        from stockroom.services.stats_service import StatsService

        service = StatsService(db.session)
        inventory = service.inventory_stats(user_id)
        agenda = service.agenda_stats(user_id)
        click.echo(f"Total products: {inventory['totalProducts']}")
        click.echo(f"  Low stock alerts: {inventory['lowStockAlerts']}")
        click.echo(f"  Out of stock variants: {inventory['outOfStockVariants']}")
        click.echo(f"Suppliers: {agenda['totalSuppliers']}")
        click.echo(f"Customers: {agenda['totalCustomers']}")
