"""
TemrinTakip Routes
==================

All route blueprints for the TemrinTakip application.

Usage:
    from temrintakip.routes import register_routes
    register_routes(app)
"""
from .page_routes import page_bp
from .student_routes import student_bp
from .analytics_routes import analytics_bp


def register_routes(app):
    """Register all route blueprints with the Flask app."""
    app.register_blueprint(page_bp)
    app.register_blueprint(student_bp)
    app.register_blueprint(analytics_bp)


__all__ = [
    'register_routes',
    'page_bp',
    'student_bp',
    'analytics_bp',
]
