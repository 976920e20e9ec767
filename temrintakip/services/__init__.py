"""
TemrinTakip Services
====================

Business logic services for the TemrinTakip application.

Services:
- student_service: Supabase-backed student store
- stats: Class statistics for the dashboard
- charts: matplotlib dashboard charts
- ai_analysis: Gemini class analysis
"""

# Services are imported directly when needed to avoid circular imports
# Example: from temrintakip.services import student_service

__all__ = [
    'student_service',
    'stats',
    'charts',
    'ai_analysis'
]
