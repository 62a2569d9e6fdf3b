from flask import current_app

from wordquiz_app.modules.vocabulary.interface import get_all_vocabulary, get_topic_stats

RECENT_LIMIT = 5


class DashboardService:
    @staticmethod
    def get_dashboard_data():
        """Collection overview for the landing page."""
        records = get_all_vocabulary()
        topics = get_topic_stats()
        min_vocabulary = current_app.config.get('QUIZ_MIN_VOCABULARY', 4)

        return {
            'total_words': len(records),
            'topic_count': len(topics),
            'topics': sorted(topics, key=lambda t: t['count'], reverse=True),
            'recent_words': sorted(records, key=lambda r: r['id'], reverse=True)[:RECENT_LIMIT],
            'quiz_ready': len(records) >= min_vocabulary,
            'words_needed': max(min_vocabulary - len(records), 0),
        }
