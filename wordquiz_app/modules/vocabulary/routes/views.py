# File: wordquiz_app/modules/vocabulary/routes/views.py
# Vocabulary page. The ``view`` query flag selects exactly one panel:
# list, add, edit, bulk or topics.

from flask import abort, current_app, flash, redirect, render_template, request, url_for

from wordquiz_app.core.error_handlers import NotFoundError, ValidationError

from .. import vocabulary_bp as blueprint
from ..forms import BulkAddForm, DeleteForm, RenameTopicForm, TopicForm, VocabularyForm
from ..logics.search import paginate
from ..services import TopicService, VocabularyService

PANELS = ('list', 'add', 'edit', 'bulk', 'topics')


def _back_to(view='list', **params):
    return redirect(url_for('vocabulary.index', view=view, **params))


def _attach_errors(form, error):
    """Copy service-level field errors onto the WTForms fields."""
    errors = (error.details or {}).get('errors') or {}
    for name, message in errors.items():
        field = getattr(form, name, None)
        if field is not None:
            field.errors = list(field.errors) + [message]
    if not errors:
        flash(error.message, 'danger')


def _render(view, **context):
    records = VocabularyService.list_vocabulary()
    topics = TopicService.list_topics()
    return render_template(
        'vocabulary/index.html',
        view=view,
        total=len(records),
        topics=topics,
        delete_form=DeleteForm(),
        **context
    )


@blueprint.route('/', methods=['GET'])
def index():
    """Render the panel selected by ?view=."""
    view = request.args.get('view', 'list')
    if view not in PANELS:
        abort(404)

    if view == 'add':
        return _render(view, form=VocabularyForm(topic=request.args.get('topic', '')))

    if view == 'edit':
        try:
            record = VocabularyService.get_vocabulary(request.args.get('id'))
        except (NotFoundError, ValidationError) as e:
            flash(e.message, 'danger')
            return _back_to()
        return _render(view, form=VocabularyForm(data=record), record=record)

    if view == 'bulk':
        return _render(view, form=_bulk_form())

    if view == 'topics':
        return _render(view, topic_form=TopicForm(), rename_form=RenameTopicForm())

    search = request.args.get('search', '')
    page = request.args.get('page', 1, type=int)
    records = VocabularyService.list_vocabulary(search)
    pagination = paginate(records, page, current_app.config.get('ITEMS_PER_PAGE', 10))
    return _render(view, search=search, pagination=pagination)


def _bulk_form():
    form = BulkAddForm()
    form.selected_ids.choices = [
        (r['id'], f"{r['word']} ({r['meaning']})") for r in VocabularyService.list_vocabulary()
    ]
    return form


@blueprint.route('/add', methods=['POST'])
def add_vocabulary():
    form = VocabularyForm()
    if not form.validate_on_submit():
        return _render('add', form=form), 400
    try:
        record = VocabularyService.create_vocabulary(form.data)
    except ValidationError as e:
        _attach_errors(form, e)
        return _render('add', form=form), 400
    flash(f"Added \"{record['word']}\".", 'success')
    return _back_to()


@blueprint.route('/<int:record_id>/edit', methods=['POST'])
def edit_vocabulary(record_id):
    form = VocabularyForm()
    if not form.validate_on_submit():
        return _render('edit', form=form, record={'id': record_id}), 400
    try:
        record = VocabularyService.update_vocabulary(dict(form.data, id=record_id))
    except NotFoundError as e:
        flash(e.message, 'danger')
        return _back_to()
    except ValidationError as e:
        _attach_errors(form, e)
        return _render('edit', form=form, record={'id': record_id}), 400
    flash(f"Updated \"{record['word']}\".", 'success')
    return _back_to()


@blueprint.route('/<int:record_id>/delete', methods=['POST'])
def delete_vocabulary(record_id):
    form = DeleteForm()
    if not form.validate_on_submit():
        flash('Invalid delete request.', 'danger')
        return _back_to()
    try:
        record = VocabularyService.delete_vocabulary(record_id)
    except NotFoundError as e:
        flash(e.message, 'danger')
        return _back_to()
    flash(f"Deleted \"{record['word']}\".", 'success')
    return _back_to()


@blueprint.route('/bulk', methods=['POST'])
def bulk_add():
    form = _bulk_form()
    if not form.validate_on_submit():
        return _render('bulk', form=form), 400
    try:
        if form.mode.data == 'select':
            moved = VocabularyService.assign_topic(form.selected_ids.data, form.topic.data)
            flash(f'Moved {len(moved)} words to topic "{form.topic.data.strip()}".', 'success')
        else:
            result = VocabularyService.bulk_add(form.topic.data, form.words.data)
            message = f'Added {len(result["added"])} words to topic "{form.topic.data.strip()}".'
            if result['skipped']:
                message += f' Skipped existing: {", ".join(result["skipped"])}.'
            flash(message, 'success')
    except (ValidationError, NotFoundError) as e:
        for line, problem in ((e.details or {}).get('errors') or {}).items():
            form.words.errors = list(form.words.errors) + [f'Line {line}: {problem}']
        flash(e.message, 'danger')
        return _render('bulk', form=form), 400
    return _back_to()


@blueprint.route('/topics/add', methods=['POST'])
def add_topic():
    form = TopicForm()
    if form.validate_on_submit():
        try:
            result = TopicService.create_topic(form.name.data)
        except ValidationError as e:
            flash(e.message, 'danger')
        else:
            flash(f'Topic "{result["topic"]}" is ready to use. Add words to it to make it appear in the list.', 'info')
            return redirect(url_for('vocabulary.index', view='add', topic=result['topic']))
    return _back_to('topics')


@blueprint.route('/topics/rename', methods=['POST'])
def rename_topic():
    form = RenameTopicForm()
    if form.validate_on_submit():
        try:
            result = TopicService.rename_topic(form.old_name.data, form.new_name.data)
        except (ValidationError, NotFoundError) as e:
            flash(e.message, 'danger')
        else:
            flash(result['message'], 'success')
    else:
        flash('New name is required', 'danger')
    return _back_to('topics')


@blueprint.route('/topics/delete', methods=['POST'])
def delete_topic():
    form = DeleteForm()
    if form.validate_on_submit():
        try:
            result = TopicService.delete_topic(form.target.data)
        except (ValidationError, NotFoundError) as e:
            flash(e.message, 'danger')
        else:
            flash(result['message'], 'success')
    return _back_to('topics')
