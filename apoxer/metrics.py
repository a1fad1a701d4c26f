from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, request
import logging
import time
from functools import wraps

logger = logging.getLogger("main")

# Database Metrics
db_query_duration_seconds = Histogram(
    "apoxer_db_query_duration_seconds", "Database query duration", ["operation"]
)

db_query_total = Counter("apoxer_db_queries_total", "Total database queries", ["operation", "status"])

db_games_total = Gauge("apoxer_games_total", "Total number of games")
db_players_total = Gauge("apoxer_players_total", "Total number of per-game players")
db_profiles_total = Gauge("apoxer_profiles_total", "Total number of social profiles")
db_users_total = Gauge("apoxer_users_total", "Total number of login accounts")
db_events_active_total = Gauge("apoxer_events_active_total", "Number of active events")

# API Metrics
api_request_duration_seconds = Histogram(
    "apoxer_api_request_duration_seconds", "API request duration", ["endpoint", "method"]
)

api_requests_total = Counter("apoxer_api_requests_total", "Total API requests", ["endpoint", "method", "status_code"])

# Aggregation Metrics
aggregation_slices_total = Counter(
    "apoxer_aggregation_slices_total", "Concurrent page slices by outcome", ["slice", "outcome"]
)

aggregation_slice_duration_seconds = Histogram(
    "apoxer_aggregation_slice_duration_seconds", "Time spent fetching one page slice", ["slice"]
)

# Seeding Metrics
seed_rows_inserted_total = Counter("apoxer_seed_rows_inserted_total", "Rows inserted by seed operations", ["kind"])


def init_metrics(app):
    @app.route("/api/metrics")
    def metrics():
        update_db_metrics()
        return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)

    @app.before_request
    def before_request():
        request.start_time = time.time()

    @app.after_request
    def after_request(response):
        duration = time.time() - getattr(request, "start_time", time.time())
        api_request_duration_seconds.labels(endpoint=request.endpoint or "unknown", method=request.method).observe(
            duration
        )
        api_requests_total.labels(
            endpoint=request.endpoint or "unknown", method=request.method, status_code=response.status_code
        ).inc()
        return response

    app.logger.info("Prometheus metrics initialized at /api/metrics")


def update_db_metrics():
    """Refresh the row count gauges; a failing count leaves the previous value."""
    from apoxer.exceptions import DatabaseException
    from apoxer.repositories.events_repository import EventsRepository
    from apoxer.repositories.games_repository import GamesRepository
    from apoxer.repositories.players_repository import PlayersRepository
    from apoxer.repositories.profiles_repository import ProfilesRepository
    from apoxer.repositories.user_repository import UserRepository

    try:
        db_games_total.set(GamesRepository.count())
        db_players_total.set(PlayersRepository.count())
        db_profiles_total.set(ProfilesRepository.count())
        db_users_total.set(UserRepository.count())
        db_events_active_total.set(EventsRepository.count_active())
    except DatabaseException as e:
        logger.warning(f"Could not refresh database gauges: {e.message}")


def track_db_query(operation):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                db_query_total.labels(operation=operation, status="success").inc()
                return result
            except Exception:
                db_query_total.labels(operation=operation, status="error").inc()
                raise
            finally:
                duration = time.time() - start_time
                db_query_duration_seconds.labels(operation=operation).observe(duration)

        return wrapper

    return decorator


def record_slice(name, outcome, duration):
    aggregation_slices_total.labels(slice=name, outcome=outcome).inc()
    aggregation_slice_duration_seconds.labels(slice=name).observe(duration)
