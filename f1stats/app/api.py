"""
F1 Stats API Server
Flask REST API serving normalized F1 data and driver portraits to the frontend
"""

import logging

from flask import Flask, Response, jsonify, request
from flask_cors import CORS

from f1stats.cache_layer import get_cache
from f1stats.errors import F1ApiError
from f1stats.models import (
    SESSION_TYPES,
    circuit_from_api,
    constructor_champion_from_standings,
    constructor_standing_from_api,
    driver_champion_from_standings,
    driver_from_api,
    driver_standing_from_api,
    race_from_api,
    season_from_api,
    session_results,
    session_time,
    simplify_team_name,
    sort_seasons,
    team_from_api,
    to_dict,
)
from f1stats.services import scheduler as podium_scheduler
from f1stats.services.driver_images import (
    DriverImageResolver,
    is_placeholder,
    placeholder_svg,
)
from f1stats.services.f1_api import F1ApiClient
from f1stats.services.wikipedia import WikipediaImageSource
from f1stats.utils.circuits import describe_circuit, format_circuit_length, format_driver_name
from f1stats.utils.config import config as default_config
from f1stats.utils.countries import get_flag_emoji
from f1stats.utils.dates import (
    RACE_STATUSES,
    calculate_age,
    count_races_by_status,
    filter_races,
    format_circuit_time,
    session_datetime,
    time_until,
    utc_now,
)
from f1stats.utils.teams import get_team_color, get_team_config

logger = logging.getLogger(__name__)


def configure_logging(level_name: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def create_app(config=None, resolver=None, f1_client=None, cache=None) -> Flask:
    """
    Build the Flask app. Collaborators are created from ``config`` unless
    passed in, which is how tests swap in fakes.
    """
    config = config or default_config
    cache = cache or get_cache(config.REDIS_URL)
    if f1_client is None:
        f1_client = F1ApiClient(
            base_url=config.F1_API_BASE_URL,
            timeout=config.F1_API_TIMEOUT,
            cache=cache,
            user_agent=config.HTTP_USER_AGENT,
        )
    if resolver is None:
        source = WikipediaImageSource(
            api_url=config.WIKIPEDIA_API_URL,
            thumb_size=config.WIKIPEDIA_THUMB_SIZE,
            timeout=config.IMAGE_REQUEST_TIMEOUT,
            user_agent=config.HTTP_USER_AGENT,
        )
        resolver = DriverImageResolver(source, cache)

    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.SECRET_KEY
    app.config["TESTING"] = config.TESTING
    app.extensions["f1_client"] = f1_client
    app.extensions["image_resolver"] = resolver

    CORS(app, resources={
        r"/api/*": {
            "origins": config.CORS_ORIGINS,
            "methods": ["GET", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization"],
            "supports_credentials": False
        }
    })

    @app.after_request
    def add_header(response):
        """Upstream data has its own cache policy; keep browsers from adding another"""
        if request.path.startswith('/api/') and response.mimetype == 'application/json':
            response.headers['Cache-Control'] = 'no-store, no-cache, must-revalidate, max-age=0'
        return response

    # ---------- error handlers ----------
    @app.errorhandler(F1ApiError)
    def handle_upstream(e):
        logger.warning(f"Upstream F1 API error: {e}")
        return jsonify({"success": False, "error": str(e)}), 502

    @app.errorhandler(404)
    def handle_404(e):
        return jsonify({"success": False, "error": "Not found"}), 404

    @app.errorhandler(500)
    def handle_500(e):
        logger.error(f"Unhandled exception: {getattr(e, 'original_exception', e)}")
        return jsonify({"success": False, "error": "Internal server error"}), 500

    # ---------- service ----------
    @app.route('/')
    def home():
        """Health check endpoint"""
        return jsonify({
            "status": "online",
            "message": "F1 Stats API is running",
            "version": "1.0.0"
        })

    @app.route('/api/health')
    def health_check():
        """Detailed health check with cache and resolver status"""
        return jsonify({
            "status": "healthy",
            "image_resolver": resolver.health_check(),
            "scheduler_running": podium_scheduler.scheduler.running,
        })

    # ---------- driver portraits ----------
    @app.route('/api/driver-image', methods=['GET'])
    def driver_image():
        """Resolve a driver portrait (Wikipedia thumbnail or generated badge)"""
        driver_id = (request.args.get("driver_id") or "").strip()
        if not driver_id:
            return jsonify({"success": False, "error": "missing : driver_id"}), 400
        image_url = resolver.resolve(driver_id, request.args.get("name"))
        return jsonify({
            "success": True,
            "driver_id": driver_id,
            "image_url": image_url,
            "placeholder": is_placeholder(image_url),
        })

    @app.route('/api/driver-image/<driver_id>/placeholder.svg', methods=['GET'])
    def driver_placeholder(driver_id):
        """Serve the generated badge as a plain SVG file"""
        response = Response(placeholder_svg(driver_id), mimetype="image/svg+xml")
        response.headers['Cache-Control'] = 'public, max-age=86400'
        return response

    # ---------- standings ----------
    def driver_standings_payload(limit, with_images=False):
        standings = [driver_standing_from_api(row) for row in f1_client.get_driver_championship(limit=limit)]
        pictures = resolver.resolve_many([s.ref() for s in standings]) if with_images else {}
        data = []
        for s in standings:
            row = to_dict(s)
            row["team_short_name"] = simplify_team_name(s.team_name)
            row["team_color"] = get_team_color(s.team_id)
            if with_images:
                row["image_url"] = pictures.get(s.driver_id)
            data.append(row)
        return data

    def constructor_standings_payload():
        data = []
        for row in f1_client.get_constructor_championship():
            standing = constructor_standing_from_api(row)
            item = to_dict(standing)
            item["team_short_name"] = simplify_team_name(standing.team_name)
            item["team_color"] = get_team_color(standing.team_id)
            data.append(item)
        return data

    @app.route('/api/standings/drivers', methods=['GET'])
    def api_driver_standings():
        """Current driver championship; ?images=1 adds portrait URLs"""
        limit = request.args.get("limit", default=None, type=int)
        with_images = request.args.get("images", "0").lower() in ("1", "true", "yes")
        data = driver_standings_payload(limit, with_images)
        logger.info(f"✓ Driver standings complete: {len(data)} drivers")
        return jsonify({"success": True, "source": "f1api.dev", "data": data})

    @app.route('/api/standings/constructors', methods=['GET'])
    def api_constructor_standings():
        """Current constructor championship"""
        data = constructor_standings_payload()
        logger.info(f"✓ Constructor standings complete: {len(data)} constructors")
        return jsonify({"success": True, "source": "f1api.dev", "data": data})

    @app.route('/api/standings', methods=['GET'])
    def standings():
        """Driver and constructor standings together (home page)"""
        return jsonify({
            "success": True,
            "standings": {
                "drivers": driver_standings_payload(limit=10),
                "constructors": constructor_standings_payload(),
            }
        })

    # ---------- races ----------
    @app.route('/api/next-race', methods=['GET'])
    def api_next_race():
        """Next race with countdown"""
        payload = f1_client.get_next_race()
        races = payload.get("race") or []
        if not races:
            return jsonify({"success": False, "error": "No next race found"}), 404

        race = race_from_api(races[0])
        start = session_datetime(race.race_date, race.race_time)
        return jsonify({
            "success": True,
            "season": payload.get("season"),
            "race": to_dict(race),
            "starts_at": start.isoformat() if start else None,
            "local_start": format_circuit_time(race.race_date, race.race_time, race.country),
            "countdown": time_until(start),
        })

    @app.route('/api/races', methods=['GET'])
    def api_races():
        """Current season calendar filtered by ?status=all|completed|upcoming"""
        status = request.args.get("status", "all").lower()
        if status not in RACE_STATUSES:
            return jsonify({"success": False, "error": f"status must be one of {', '.join(RACE_STATUSES)}"}), 400

        season = f1_client.get_current_season()
        races = [race_from_api(r) for r in season.get("races") or []]
        now = utc_now()
        data = []
        for race in filter_races(races, status, now):
            item = to_dict(race)
            item["flag"] = get_flag_emoji(race.country)
            item["local_start"] = format_circuit_time(race.race_date, race.race_time, race.country)
            data.append(item)
        return jsonify({
            "success": True,
            "season": season.get("season"),
            "status": status,
            "counts": count_races_by_status(races, now),
            "data": data,
        })

    @app.route('/api/results/<int:year>/<int:round_number>/<session>', methods=['GET'])
    def api_results(year, round_number, session):
        """Classification of one session (fp1, fp2, fp3, qualy, race)"""
        if session not in SESSION_TYPES:
            return jsonify({"success": False, "error": f"session must be one of {', '.join(SESSION_TYPES)}"}), 400

        payload = f1_client.get_results(year, round_number, session)
        if payload is None:
            return jsonify({"success": False, "error": "No results available"}), 404
        return jsonify({
            "success": True,
            "season": year,
            "round": round_number,
            "session": session,
            "schedule": session_time(payload, session),
            "data": session_results(payload, session),
        })

    # ---------- drivers & teams ----------
    @app.route('/api/drivers', methods=['GET'])
    def api_drivers():
        """Current drivers with age and team colours"""
        data = []
        for raw in f1_client.get_all_drivers():
            driver = driver_from_api(raw)
            item = to_dict(driver)
            item["age"] = calculate_age(driver.birthday)
            item["team_config"] = get_team_config(driver.team)
            data.append(item)
        return jsonify({"success": True, "data": data})

    @app.route('/api/teams', methods=['GET'])
    def api_teams():
        """Current teams ordered by championship position, each with its drivers"""
        teams = []
        for raw in f1_client.get_teams():
            team_id = raw.get("teamId")
            drivers = [driver_from_api(d) for d in f1_client.get_team_drivers(team_id)] if team_id else []
            teams.append(team_from_api(raw, drivers))
        teams.sort(key=lambda t: t.position or 99)

        data = []
        for team in teams:
            item = to_dict(team)
            item["team_config"] = get_team_config(team.team_id)
            data.append(item)
        return jsonify({"success": True, "data": data})

    # ---------- seasons ----------
    @app.route('/api/seasons', methods=['GET'])
    def api_seasons():
        """All championships, newest first"""
        seasons = sort_seasons([season_from_api(s) for s in f1_client.get_seasons()])
        return jsonify({"success": True, "data": to_dict(seasons)})

    @app.route('/api/seasons/<int:year>/champions', methods=['GET'])
    def api_season_champions(year):
        """Driver and constructor champion (or leader) of a season"""
        drivers = f1_client.get_driver_championship_by_year(year).get("drivers_championship") or []
        constructors = f1_client.get_constructor_championship_by_year(year).get("constructors_championship") or []
        driver_champion = driver_champion_from_standings(drivers)
        constructor_champion = constructor_champion_from_standings(constructors)
        return jsonify({
            "success": True,
            "season": year,
            "driver_champion": to_dict(driver_champion) if driver_champion else None,
            "constructor_champion": to_dict(constructor_champion) if constructor_champion else None,
        })

    # ---------- circuits ----------
    @app.route('/api/circuits', methods=['GET'])
    def api_circuits():
        """Circuits with layout facts and characteristic ratings"""
        data = []
        for raw in f1_client.get_circuits():
            circuit = circuit_from_api(raw)
            item = to_dict(circuit)
            item["length"] = format_circuit_length(circuit.length_m)
            item["flag"] = get_flag_emoji(circuit.country)
            item["fastest_lap_driver"] = format_driver_name(circuit.fastest_lap_driver_id)
            item["characteristics"] = describe_circuit(circuit.circuit_id, circuit.length_m, circuit.corners)
            data.append(item)
        return jsonify({"success": True, "data": data})

    if config.ENABLE_SCHEDULER and not config.TESTING:
        podium_scheduler.start_scheduler(f1_client, resolver, hours=config.PODIUM_REFRESH_HOURS)

    return app
