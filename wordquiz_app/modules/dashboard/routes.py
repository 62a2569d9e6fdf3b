from flask import render_template

from . import dashboard_bp
from .services import DashboardService


@dashboard_bp.route('/')
def dashboard():
    """Overview page: collection size, topics and quiz availability."""
    data = DashboardService.get_dashboard_data()
    return render_template('dashboard/index.html', **data)
