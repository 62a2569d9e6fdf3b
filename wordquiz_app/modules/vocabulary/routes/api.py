# File: wordquiz_app/modules/vocabulary/routes/api.py
# JSON endpoints for vocabulary records and topics.

from flask import current_app, jsonify, request

from .. import vocabulary_api_bp as blueprint
from ..services import TopicService, VocabularyService


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@blueprint.route('/vocabulary', methods=['GET'])
def list_vocabulary():
    """All records, optionally filtered with ?search=."""
    return jsonify(VocabularyService.list_vocabulary(request.args.get('search')))


@blueprint.route('/vocabulary', methods=['POST'])
def create_vocabulary():
    record = VocabularyService.create_vocabulary(_json_body())
    return jsonify(record), 201


@blueprint.route('/vocabulary', methods=['PUT'])
def update_vocabulary():
    record = VocabularyService.update_vocabulary(_json_body())
    return jsonify(record)


@blueprint.route('/vocabulary', methods=['DELETE'])
def delete_vocabulary():
    VocabularyService.delete_vocabulary(request.args.get('id'))
    return jsonify({'message': 'Vocabulary deleted successfully'})


@blueprint.route('/vocabulary/bulk', methods=['POST'])
def bulk_vocabulary():
    """Bulk add from ``text`` lines, or move the records in ``ids`` to ``topic``."""
    data = _json_body()
    if 'ids' in data:
        moved = VocabularyService.assign_topic(data.get('ids'), data.get('topic'))
        return jsonify({'message': f'Moved {len(moved)} words', 'updated': moved})

    result = VocabularyService.bulk_add(data.get('topic'), data.get('text', ''))
    current_app.logger.info("Bulk add: %d added, %d skipped", len(result['added']), len(result['skipped']))
    return jsonify(result), 201


@blueprint.route('/topics', methods=['GET'])
def list_topics():
    return jsonify(TopicService.list_topics())


@blueprint.route('/topics', methods=['POST'])
def create_topic():
    return jsonify(TopicService.create_topic(_json_body().get('name')))


@blueprint.route('/topics', methods=['PUT'])
def rename_topic():
    data = _json_body()
    return jsonify(TopicService.rename_topic(data.get('oldName'), data.get('newName')))


@blueprint.route('/topics', methods=['DELETE'])
def delete_topic():
    return jsonify(TopicService.delete_topic(_json_body().get('name')))
