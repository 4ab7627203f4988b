"""
Flask API routes for the physics formula API.

Shared endpoints (catalog and constants) are defined here; every
FormulaService mounts its own calculation endpoints onto the same
blueprint.

Endpoints:
  GET  /api/v1/services                       - registered formula services
  GET  /api/v1/constants                      - physical constants table
  GET  /api/v1/<category>/formulas            - formula catalog (?search=term)
  GET  /api/v1/<category>/formulas/<slug>     - equation and declared inputs
  POST /api/v1/<category>/<slug>              - run a calculation
"""

from flask import Blueprint, jsonify, request

from physics import constants


def create_api_blueprint(registry, url_prefix="/api/v1"):
    """
    Build the API blueprint for a populated registry.

    Parameters
    ----------
    registry : FormulaRegistry
        Registry whose services mount their calculation endpoints.
    url_prefix : str
        Mount point of the blueprint.

    Returns
    -------
    flask.Blueprint
    """
    api = Blueprint("api", __name__, url_prefix=url_prefix)

    @api.route("/services", methods=["GET"])
    def list_services():
        """Return metadata for every registered formula service."""
        return jsonify(registry.list_all())

    @api.route("/constants", methods=["GET"])
    def get_constants():
        """Return the physical constants used as formula defaults."""
        return jsonify(constants.as_dict())

    @api.route("/<category>/formulas", methods=["GET"])
    def list_formulas(category):
        """
        Return the formula catalog of one category.

        Query parameters:
            search : optional case-insensitive filter on slug, equation
                     and description
        """
        if category not in registry.categories():
            return jsonify({"error": "Unknown category: {}".format(category)}), 404
        formulas = registry.formulas(category, search=request.args.get("search"))
        return jsonify({
            "category": category,
            "count": len(formulas),
            "formulas": [
                {"slug": f.slug, "equation": f.equation,
                 "description": f.description, "kind": f.kind}
                for f in formulas
            ],
        })

    @api.route("/<category>/formulas/<slug>", methods=["GET"])
    def get_formula(category, slug):
        """Return the equation text and declared quantities of a formula."""
        formula = registry.find(category, slug)
        if formula is None:
            return jsonify({"error": "Formula not found"}), 404
        meta = formula.metadata()
        meta["category"] = category
        meta["endpoint"] = "{}/{}/{}".format(url_prefix, category, slug)
        return jsonify(meta)

    # Service-owned calculation routes
    for service in registry.services():
        service.register_routes(api)

    return api
