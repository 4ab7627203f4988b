"""
Physics Formula API
Flask application factory.

Serves a REST API of closed-form physics and engineering formulas via
registered FormulaService instances. Every calculation endpoint takes a
JSON object of named quantities and answers {"result", "inputs"} or
{"error"}.

Configuration comes from DEFAULT_CONFIG, then environment variables,
then the mapping passed to create_app():

    PHYSICS_API_PREFIX   URL prefix of the API blueprint (default /api/v1)
    PHYSICS_LOG_LEVEL    Logging level name (default INFO)
    PHYSICS_CORS_ORIGINS Comma-separated origins allowed on /api/* (default *)
    HOST, PORT           Development server bind address

Usage:
    python app.py              # Development server on http://localhost:5000
    flask run                  # Same, via Flask CLI
"""

__version__ = "0.1.0"

import logging
import os

from flask import Flask, jsonify, request
from flask_cors import CORS

from physics.services import FormulaRegistry
from physics.services.circular_motion import CircularMotionService
from physics.services.electromagnetism import ElectromagnetismService
from physics.services.engineering import EngineeringService
from physics.services.fluids import FluidsService
from physics.services.gravitation import GravitationService
from physics.services.heat_transfer import HeatTransferService
from physics.services.mechanics import MechanicsService
from physics.services.momentum import MomentumService
from physics.services.nuclear import NuclearService
from physics.services.optics import OpticsService
from physics.services.oscillations import OscillationsService
from physics.services.relativity_quantum import RelativityQuantumService
from physics.services.rotational_motion import RotationalMotionService
from physics.services.solid_mechanics import SolidMechanicsService
from physics.services.thermal import ThermalService
from physics.services.waves import WavesService
from physics.services.work_energy import WorkEnergyService

log = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "API_PREFIX": "/api/v1",
    "LOG_LEVEL": "INFO",
    "CORS_ORIGINS": "*",
    "HOST": "127.0.0.1",
    "PORT": 5000,
}

# Environment variable -> config key
ENV_OVERRIDES = {
    "PHYSICS_API_PREFIX": "API_PREFIX",
    "PHYSICS_LOG_LEVEL": "LOG_LEVEL",
    "PHYSICS_CORS_ORIGINS": "CORS_ORIGINS",
    "HOST": "HOST",
    "PORT": "PORT",
}


def create_registry():
    """Build and populate the service registry."""
    registry = FormulaRegistry()
    registry.register(MechanicsService())
    registry.register(MomentumService())
    registry.register(CircularMotionService())
    registry.register(WorkEnergyService())
    registry.register(RotationalMotionService())
    registry.register(GravitationService())
    registry.register(OscillationsService())
    registry.register(FluidsService())
    registry.register(ThermalService())
    registry.register(HeatTransferService())
    registry.register(WavesService())
    registry.register(OpticsService())
    registry.register(ElectromagnetismService())
    registry.register(RelativityQuantumService())
    registry.register(NuclearService())
    registry.register(SolidMechanicsService())
    registry.register(EngineeringService())
    return registry


def load_config(overrides=None):
    """
    Resolve the application config.

    Parameters
    ----------
    overrides : dict, optional
        Highest-priority values (e.g. from tests).

    Returns
    -------
    dict
    """
    config = dict(DEFAULT_CONFIG)
    for env_name, key in ENV_OVERRIDES.items():
        if env_name in os.environ:
            config[key] = os.environ[env_name]
    if overrides:
        config.update(overrides)
    config["PORT"] = int(config["PORT"])
    return config


def configure_logging(level_name):
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        raise ValueError("Unknown log level: {}".format(level_name))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("physics").setLevel(level)


def create_app(config=None):
    """Application factory for the physics formula API."""
    app = Flask(__name__)
    app.config.update(load_config(config))
    configure_logging(app.config["LOG_LEVEL"])

    origins = app.config["CORS_ORIGINS"]
    if isinstance(origins, str) and origins != "*":
        origins = [o.strip() for o in origins.split(",") if o.strip()]
    CORS(app, resources={
        r"/api/*": {
            "origins": origins,
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type"],
        }
    })

    # Build service registry
    registry = create_registry()
    app.extensions["formula_registry"] = registry

    # Create and register API blueprint (shared + service-owned routes)
    from api.routes import create_api_blueprint
    api = create_api_blueprint(registry, url_prefix=app.config["API_PREFIX"])
    app.register_blueprint(api)

    @app.route("/")
    def root():
        return jsonify({
            "name": "Physics Formula API",
            "version": __version__,
            "services": "{}/services".format(app.config["API_PREFIX"]),
        })

    @app.route("/api/health")
    def health():
        return jsonify({"status": "healthy", "version": __version__})

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            "url": request.path,
            "error": "Can't find what you are looking for.",
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            "url": request.path,
            "error": "Method {} not allowed.".format(request.method),
        }), 405

    @app.errorhandler(500)
    def internal_error(error):
        log.error("Unhandled error on %s: %s", request.path, error)
        return jsonify({"error": "An unexpected error occurred."}), 500

    log.info("Physics Formula API %s: %d services mounted at %s",
             __version__, len(registry.services()), app.config["API_PREFIX"])
    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, host=app.config["HOST"], port=app.config["PORT"])
