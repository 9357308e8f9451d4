"""Flask front for the mock service.

Serves the same routes as the Playwright adapter over real HTTP, for a
storefront that is configured with the mock's URL instead of intercepting
calls in the browser.
"""
from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, Response, current_app, jsonify, request

from .service import MockPizzaService

logger = logging.getLogger(__name__)

API_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH"]


def create_mock_api_app(service: Optional[MockPizzaService] = None) -> Flask:
    """Create and configure the mock API Flask app."""
    app = Flask(__name__)
    app.config['TESTING'] = True
    app.config['MOCK_SERVICE'] = service or MockPizzaService()

    @app.after_request
    def allow_cross_origin(response: Response) -> Response:
        # The storefront dev server runs on a different port.
        response.headers['Access-Control-Allow-Origin'] = request.headers.get('Origin', '*')
        response.headers['Access-Control-Allow-Credentials'] = 'true'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type, Authorization'
        response.headers['Access-Control-Allow-Methods'] = ', '.join(API_METHODS + ['OPTIONS'])
        return response

    @app.get('/health')
    def health():
        return jsonify({"status": "ok"})

    @app.post('/__reset')
    def reset():
        current_app.config['MOCK_SERVICE'].reset()
        return jsonify({"status": "reset"})

    @app.route('/api/<path:subpath>', methods=API_METHODS + ['OPTIONS'])
    def api_endpoint(subpath: str):
        if request.method == 'OPTIONS':
            return Response(status=204)

        mock: MockPizzaService = current_app.config['MOCK_SERVICE']
        body = request.get_json(silent=True)
        result = mock.handle(request.method, request.full_path, body)
        if result is None:
            return jsonify({"error": "not found"}), 404
        if result.body is None:
            return Response(status=result.status, mimetype='application/json')
        return jsonify(result.body), result.status

    return app
