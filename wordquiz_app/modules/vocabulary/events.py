"""
Event handlers for the vocabulary module.

Writes an activity trail of collection changes to the application log.
"""
from flask import current_app

from wordquiz_app.core.signals import (
    topic_deleted,
    topic_renamed,
    vocabulary_created,
    vocabulary_deleted,
    vocabulary_updated,
)


@vocabulary_created.connect
def on_vocabulary_created(sender, record=None, **kwargs):
    current_app.logger.info(f"[Vocabulary] Added #{record['id']} '{record['word']}' to topic '{record['topic']}'")


@vocabulary_updated.connect
def on_vocabulary_updated(sender, record=None, previous=None, **kwargs):
    changed = [field for field in ('word', 'meaning', 'phonetic', 'topic') if previous and previous.get(field) != record.get(field)]
    current_app.logger.info(f"[Vocabulary] Updated #{record['id']} ({', '.join(changed) or 'no changes'})")


@vocabulary_deleted.connect
def on_vocabulary_deleted(sender, record=None, **kwargs):
    current_app.logger.info(f"[Vocabulary] Deleted #{record['id']} '{record['word']}'")


@topic_renamed.connect
def on_topic_renamed(sender, old_name=None, new_name=None, updated_count=0, **kwargs):
    current_app.logger.info(f"[Vocabulary] Topic '{old_name}' renamed to '{new_name}' ({updated_count} words)")


@topic_deleted.connect
def on_topic_deleted(sender, name=None, deleted_count=0, **kwargs):
    current_app.logger.warning(f"[Vocabulary] Topic '{name}' deleted with {deleted_count} words")
