# primegen/primes/routes.py
import logging
import traceback
from flask import request, jsonify, current_app
from werkzeug.exceptions import HTTPException
from . import primes_bp
from .limit import parse_limit, LimitError
from .service import compute_primes
from ..config import Config

log = logging.getLogger(__name__)


def _result(message: str, primes: list[int], status: int):
    return jsonify({"message": message, "generatedPrimes": primes}), status


@primes_bp.route("/primes", methods=["GET"])
def generate_primes():
    param = current_app.config.get("GENERATION_LIMIT_PARAM", Config.GENERATION_LIMIT_PARAM)
    raw = request.args.get(param)

    limit = parse_limit(raw)
    if isinstance(limit, LimitError):
        # entrada inválida do usuário, não é falha do serviço
        log.info("generationLimit rejeitado (%r): %s", raw, limit.message)
        return _result(limit.message, [], 422)

    primes = compute_primes(limit.value)
    log.debug("gerados %d primos até %d", len(primes), limit.value)
    return _result(current_app.config.get("SUCCESS_MESSAGE", Config.SUCCESS_MESSAGE), primes, 200)


@primes_bp.errorhandler(Exception)
def internal_error(e):
    if isinstance(e, HTTPException):
        return e
    tb = traceback.format_exc()
    logging.error(tb)
    return _result(str(e) or e.__class__.__name__, [], 500)
