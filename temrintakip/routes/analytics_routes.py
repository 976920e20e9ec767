"""
Analytics API routes for TemrinTakip.
Class statistics and the Gemini class analysis.
"""
import threading
from flask import Blueprint, jsonify

from temrintakip.config import config
from temrintakip.services import student_service, ai_analysis
from temrintakip.services.stats import compute_class_stats

analytics_bp = Blueprint('analytics', __name__)

# Last successful analysis; a failed request leaves it untouched.
analysis_state = {"analysis": None}
_analysis_lock = threading.Lock()


def current_stats(students=None):
    """Class stats for the given students (or the whole store)."""
    if students is None:
        students = student_service.get_all()
    return compute_class_stats(students, config.pass_threshold)


def get_last_analysis():
    with _analysis_lock:
        return analysis_state["analysis"]


def run_analysis(stats):
    """Request a new analysis. Returns (analysis, succeeded)."""
    result = ai_analysis.analyze_class(stats)
    with _analysis_lock:
        if result is not None:
            analysis_state["analysis"] = result
        return analysis_state["analysis"], result is not None


def reset_analysis():
    with _analysis_lock:
        analysis_state["analysis"] = None


@analytics_bp.route('/api/status')
def status():
    return jsonify({"status": "ok", "config": config.to_dict()})


@analytics_bp.route('/api/stats')
def get_stats():
    """Dashboard figures, or null for an empty class."""
    return jsonify({"stats": current_stats()})


@analytics_bp.route('/api/analysis', methods=['GET'])
def get_analysis():
    return jsonify({"analysis": get_last_analysis()})


@analytics_bp.route('/api/analysis', methods=['POST'])
def create_analysis():
    """Run the AI analysis over the current class."""
    stats = current_stats()
    if stats is None:
        return jsonify({"error": "No students to analyse", "analysis": get_last_analysis()}), 400

    analysis, succeeded = run_analysis(stats)
    return jsonify({"analysis": analysis, "updated": succeeded})
