"""JSON endpoints."""

from __future__ import annotations

from flask import current_app, jsonify

from ...core.error_handlers import success_response
from ...core.signals import word_served
from ..words.store import get_word_store
from . import api_bp


@api_bp.route('/words/random')
def random_word():
    word = get_word_store().random()
    word_served.send(current_app._get_current_object(), word=word, channel='api')
    return jsonify(success_response(word.to_dict()))
