"""
Central Signal Registry.

Uses blinker so modules can react to vocabulary and quiz events without
importing each other.

Usage:
    # Publisher (sender)
    from wordquiz_app.core.signals import vocabulary_created
    vocabulary_created.send(None, record=record)

    # Subscriber (receiver) - in module's events.py
    @vocabulary_created.connect
    def on_vocabulary_created(sender, **kwargs):
        ...
"""
from blinker import Namespace

# ============================================
# Vocabulary Signals
# ============================================
vocabulary_signals = Namespace()

# Payload: record (dict)
vocabulary_created = vocabulary_signals.signal('vocabulary_created')

# Payload: record (dict), previous (dict)
vocabulary_updated = vocabulary_signals.signal('vocabulary_updated')

# Payload: record (dict)
vocabulary_deleted = vocabulary_signals.signal('vocabulary_deleted')

# Payload: old_name, new_name, updated_count
topic_renamed = vocabulary_signals.signal('topic_renamed')

# Payload: name, deleted_count
topic_deleted = vocabulary_signals.signal('topic_deleted')

# ============================================
# Quiz Signals
# ============================================
quiz_signals = Namespace()

# Payload: question_type, is_correct
answer_checked = quiz_signals.signal('answer_checked')

# Payload: mode, correct, total, percentage
quiz_finished = quiz_signals.signal('quiz_finished')
