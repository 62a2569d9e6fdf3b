# File: wordquiz_app/modules/vocabulary/forms.py
# Forms for the vocabulary page panels.

from flask_wtf import FlaskForm
from wtforms import HiddenField, RadioField, SelectMultipleField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional


class VocabularyForm(FlaskForm):
    """
    Add or edit a single vocabulary record.
    """
    word = StringField('Word', validators=[DataRequired(message="Word is required"), Length(max=200)])
    meaning = StringField('Meaning', validators=[DataRequired(message="Meaning is required"), Length(max=500)])
    phonetic = StringField('Phonetic', validators=[DataRequired(message="Phonetic is required"), Length(max=200)])
    topic = StringField('Topic', validators=[DataRequired(message="Topic is required"), Length(max=100)])
    submit = SubmitField('Save')


class BulkAddForm(FlaskForm):
    """
    Bulk add: either paste ``word:meaning[:phonetic]`` lines, or pick existing
    words to move into the topic.
    """
    mode = RadioField('Mode', choices=[('text', 'Paste text'), ('select', 'Select words')], default='text')
    topic = StringField('Topic', validators=[DataRequired(message="Topic is required"), Length(max=100)])
    words = TextAreaField('Words (one per line: word:meaning or word:meaning:phonetic)', validators=[Optional()])
    selected_ids = SelectMultipleField('Words', coerce=int, validate_choice=False, validators=[Optional()])
    submit = SubmitField('Add words')


class TopicForm(FlaskForm):
    name = StringField('Topic name', validators=[DataRequired(message="Topic name is required"), Length(max=100)])
    submit = SubmitField('Add topic')


class RenameTopicForm(FlaskForm):
    old_name = HiddenField(validators=[DataRequired()])
    new_name = StringField('New name', validators=[DataRequired(message="New name is required"), Length(max=100)])
    submit = SubmitField('Rename')


class DeleteForm(FlaskForm):
    """Confirmation form for delete buttons (carries the CSRF token)."""
    target = HiddenField(validators=[DataRequired()])
    submit = SubmitField('Delete')
