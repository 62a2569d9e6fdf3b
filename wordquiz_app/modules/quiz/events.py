"""
Event handlers for the quiz module.
"""
from flask import current_app

from wordquiz_app.core.signals import answer_checked, quiz_finished


@answer_checked.connect
def on_answer_checked(sender, question_type=None, is_correct=False, **kwargs):
    current_app.logger.debug(f"[Quiz] {question_type} answer graded: {'correct' if is_correct else 'wrong'}")


@quiz_finished.connect
def on_quiz_finished(sender, mode=None, correct=0, total=0, percentage=0, **kwargs):
    current_app.logger.info(f"[Quiz] Finished {mode} quiz: {correct}/{total} ({percentage}%)")
