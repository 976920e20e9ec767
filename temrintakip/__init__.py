"""
TemrinTakip
===========

Flask application for tracking five exercise ("Temrin") scores per student.

Structure:
- routes/: HTML page and JSON API blueprints
- services/: Supabase store facade, class statistics, charts, Gemini analysis
- templates/: Jinja templates for the browser UI
- students.py: Student form normalisation and score helpers
- config.py: Configuration management
"""

from .config import config, Config

__version__ = "1.0.0"

__all__ = ['config', 'Config']
