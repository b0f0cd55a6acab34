"""Forms used by the words module."""

from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import StringField, SubmitField
from wtforms.validators import DataRequired, Length


class WordForm(FlaskForm):
    """Form used to add a word pair to the store."""

    polish = StringField('Polish', validators=[DataRequired(), Length(max=255)])
    english = StringField('English', validators=[DataRequired(), Length(max=255)])
    submit = SubmitField('Save word')
