"""
Calculation request adapter: turns a formula callable into a Flask view.

Every calculation endpoint shares one response envelope:

    200  {"result": <number or bool>, "inputs": <request body>}
    400  {"error": "<message>"}

The adapter is the only place calculation errors are caught. It never
retries and never returns a partial result; the client gets the
exception message and the server log gets the path and raw inputs.
NaN and infinities, in the result or anywhere in the echoed body, are
sent as null so the response stays strict JSON.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging
import math

from flask import jsonify, request

from physics.errors import CalculationError

log = logging.getLogger(__name__)


def _json_safe(value):
    # NaN / +-inf have no JSON encoding; Flask still parses them in bodies
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


def handle_calculation_request(calculation_fn):
    """
    Wrap a calculation callable as a POST view.

    Parameters
    ----------
    calculation_fn : callable
        Takes the parsed JSON body (dict, passed through verbatim with any
        extra fields) and returns a number or bool. Any exception it
        raises becomes a 400 response.

    Returns
    -------
    callable
        Flask view function.
    """

    def view(**_url_params):
        inputs = request.get_json(silent=True)
        if inputs is None:
            return jsonify({"error": "Request body must be JSON"}), 400
        if not isinstance(inputs, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        try:
            result = calculation_fn(inputs)
        except CalculationError as e:
            log.warning("Calculation rejected path=%s inputs=%s err=%s",
                        request.path, inputs, e)
            return jsonify({"error": str(e)}), 400
        except Exception as e:
            log.error("Calculation failed path=%s inputs=%s", request.path,
                      inputs, exc_info=True)
            return jsonify({"error": str(e)}), 400

        return jsonify({
            "result": _json_safe(result),
            "inputs": _json_safe(inputs),
        })

    view.__doc__ = getattr(calculation_fn, "__doc__", None)
    return view
