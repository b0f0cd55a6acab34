"""Blueprint registration for the words module."""

from flask import Blueprint


words_bp = Blueprint('words', __name__)

from . import routes  # noqa: E402  # isort:skip
