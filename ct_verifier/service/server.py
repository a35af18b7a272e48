"""
CT Verification Service
=======================

A local HTTP front end for the verification operations. It holds no log data
of its own: callers supply the proof and the root they trust, and the service
recomputes the verdict.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from flask import Flask, jsonify, request
from flask.typing import ResponseReturnValue
from werkzeug.exceptions import BadRequest, HTTPException

from ct_verifier.api import encode_verdict, evaluate_certificate
from ct_verifier.core.canonicalization import CanonicalizationError, canonical_json_dumps
from ct_verifier.core.crypto import DIGEST_ALGORITHM, digest, display_fingerprint, looks_like_fingerprint

logger = logging.getLogger(__name__)

DEFAULT_MAX_PATH_LENGTH = 64


def _json_body() -> Dict[str, Any]:
    """Return the request body as a JSON object or raise BadRequest."""
    if not request.is_json:
        raise BadRequest("Content-Type must be application/json")
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise BadRequest("Request body must be a JSON object")
    return body


def _require_str(body: Mapping[str, Any], name: str) -> str:
    value = body.get(name)
    if not isinstance(value, str):
        raise BadRequest(f"Field '{name}' must be a string")
    return value


def _proof_text(body: Mapping[str, Any]) -> str:
    """Return the proof as JSON text, re-encoding it if it arrived as an object."""
    proof = body.get("merkle_proof")
    if isinstance(proof, str):
        return proof
    if isinstance(proof, dict):
        try:
            return canonical_json_dumps(proof)
        except CanonicalizationError as e:
            raise BadRequest(f"Field 'merkle_proof' cannot be encoded: {e}")
    raise BadRequest("Field 'merkle_proof' must be a JSON string or object")


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        test_config: Optional configuration overriding defaults and environment

    Returns:
        Configured Flask application
    """
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_mapping(
        MAX_CONTENT_LENGTH=64 * 1024,  # 64KB max request
        MAX_PATH_LENGTH=DEFAULT_MAX_PATH_LENGTH,
    )
    app.config.from_prefixed_env("CT_VERIFIER")

    if test_config is not None:
        app.config.update(test_config)

    max_path_length = app.config['MAX_PATH_LENGTH']
    if isinstance(max_path_length, bool) or not isinstance(max_path_length, int) or max_path_length < 0:
        raise ValueError(
            f"MAX_PATH_LENGTH must be a non-negative integer, got {max_path_length!r}"
        )

    @app.route('/health', methods=['GET'])
    def health() -> ResponseReturnValue:
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'digest_algorithm': DIGEST_ALGORITHM,
        })

    @app.route('/verify', methods=['POST'])
    def verify() -> ResponseReturnValue:
        """Verify a certificate's inclusion proof against a trusted root."""
        body = _json_body()
        domain = _require_str(body, 'domain')
        fingerprint = _require_str(body, 'fingerprint')
        merkle_root = _require_str(body, 'merkle_root')
        proof = _proof_text(body)

        verdict = evaluate_certificate(
            domain,
            fingerprint,
            proof,
            merkle_root,
            max_path_length=max_path_length,
        )
        logger.debug("Verified certificate for %s: %s", domain, verdict.status.value)
        return app.response_class(encode_verdict(verdict), mimetype='application/json')

    @app.route('/fingerprint', methods=['POST'])
    def fingerprint() -> ResponseReturnValue:
        """Compute the fingerprint of certificate data."""
        body = _json_body()
        try:
            value = digest(_require_str(body, 'data'))
        except UnicodeEncodeError:
            raise BadRequest("Field 'data' is not valid Unicode text")
        return jsonify({
            'fingerprint': value,
            'display': display_fingerprint(value),
        })

    @app.route('/fingerprint/check', methods=['POST'])
    def check_fingerprint() -> ResponseReturnValue:
        """Check the shape of a fingerprint."""
        body = _json_body()
        value = _require_str(body, 'fingerprint')
        return jsonify({
            'fingerprint': value,
            'valid': looks_like_fingerprint(value),
        })

    # Error handlers
    @app.errorhandler(400)
    def bad_request(error: HTTPException) -> ResponseReturnValue:
        return jsonify({
            'error': 'bad_request',
            'message': error.description
        }), 400

    @app.errorhandler(404)
    def not_found(error: HTTPException) -> ResponseReturnValue:
        return jsonify({
            'error': 'not_found',
            'message': error.description
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error: HTTPException) -> ResponseReturnValue:
        return jsonify({
            'error': 'method_not_allowed',
            'message': error.description
        }), 405

    @app.errorhandler(413)
    def payload_too_large(error: HTTPException) -> ResponseReturnValue:
        return jsonify({
            'error': 'payload_too_large',
            'message': error.description
        }), 413

    @app.errorhandler(500)
    def internal_error(error: HTTPException) -> ResponseReturnValue:
        return jsonify({
            'error': 'internal_server_error',
            'message': 'An internal server error occurred'
        }), 500

    return app


def run_server(host: str = '127.0.0.1', port: int = 4000, debug: bool = False) -> None:
    """Run the verification service.

    Args:
        host: Host to bind to
        port: Port to listen on
        debug: Enable debug mode
    """
    app = create_app()
    app.run(host=host, port=port, debug=debug)
