"""Routes for learning and managing vocabulary words."""

from __future__ import annotations

from flask import current_app, flash, redirect, render_template, url_for

from ...core.extensions import db
from ...core.signals import word_served
from ...models import Word, WordPair
from . import words_bp
from .forms import WordForm
from .store import get_word_store


@words_bp.route('/')
def index():
    return redirect(url_for('words.learn'))


@words_bp.route('/learn')
def learn():
    """Show one random word pair to learn.

    The store is asked exactly once; the same pair is handed to the template
    as ``word`` and to ``word_served`` subscribers.
    """

    word = get_word_store().random()
    current_app.logger.debug("Serving word %r", word)
    word_served.send(current_app._get_current_object(), word=word, channel='html')
    return render_template('words/learn.html', word=word)


@words_bp.route('/words')
def list_words():
    words = Word.query.order_by(Word.word_id).all()
    return render_template('words/index.html', words=words)


@words_bp.route('/words/new', methods=['GET', 'POST'])
def new_word():
    form = WordForm()

    if form.validate_on_submit():
        pair = WordPair(polish=form.polish.data, english=form.english.data)
        db.session.add(Word.from_pair(pair))
        db.session.commit()
        current_app.logger.info("Added word %s = %s", pair.polish, pair.english)
        flash(f'Added {pair.polish} = {pair.english}.', 'success')
        return redirect(url_for('words.list_words'))

    return render_template('words/new.html', form=form)
