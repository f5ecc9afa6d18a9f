from stockroom.blueprints.api import api_bp, current_user_id
from stockroom.extensions import db
from stockroom.services.stats_service import StatsService


@api_bp.route("/stats/inventory", methods=["GET"])
def inventory_stats():
    return StatsService(db.session).inventory_stats(current_user_id())


@api_bp.route("/stats/agenda", methods=["GET"])
def agenda_stats():
    return StatsService(db.session).agenda_stats(current_user_id())
