from flask import Blueprint

primes_bp = Blueprint("primes", __name__)

from . import routes  # noqa: E402,F401
