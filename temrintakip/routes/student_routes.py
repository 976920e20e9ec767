"""
Student API routes for TemrinTakip.
JSON create/read/update/delete over the Supabase student store.
"""
import logging
from flask import Blueprint, request, jsonify

from temrintakip.services import student_service
from temrintakip.students import StudentValidationError, normalize_student_form, filter_students

student_bp = Blueprint('students', __name__)
logger = logging.getLogger(__name__)


@student_bp.route('/api/students', methods=['GET'])
def list_students():
    """List all students, newest first. Optional ?q= search."""
    students = student_service.get_all()
    term = request.args.get('q', '').strip()
    return jsonify({"students": filter_students(students, term)})


@student_bp.route('/api/students/<student_id>', methods=['GET'])
def get_student(student_id):
    try:
        student = student_service.get(student_id)
    except Exception as e:
        logger.error("Get student error for %s: %s", student_id, e)
        return jsonify({"error": str(e)}), 500

    if student is None:
        return jsonify({"error": "Student not found"}), 404
    return jsonify(student)


@student_bp.route('/api/students', methods=['POST'])
def create_student():
    """Create a student. Average and creation time are derived server-side."""
    try:
        form = normalize_student_form(request.get_json(silent=True))
    except StudentValidationError as e:
        return jsonify({"error": str(e)}), 400

    try:
        student = student_service.add(form)
    except Exception as e:
        logger.error("Create student error: %s", e)
        return jsonify({"error": str(e)}), 500

    return jsonify(student), 201


@student_bp.route('/api/students/<student_id>', methods=['PUT'])
def update_student(student_id):
    """Update a student's fields and scores; id and created_at are preserved."""
    try:
        form = normalize_student_form(request.get_json(silent=True))
    except StudentValidationError as e:
        return jsonify({"error": str(e)}), 400

    try:
        student = student_service.update(student_id, form)
    except Exception as e:
        logger.error("Update student error for %s: %s", student_id, e)
        return jsonify({"error": str(e)}), 500

    if student is None:
        return jsonify({"error": "Student not found"}), 404
    return jsonify(student)


@student_bp.route('/api/students/<student_id>', methods=['DELETE'])
def delete_student(student_id):
    try:
        deleted = student_service.delete(student_id)
    except Exception as e:
        logger.error("Delete student error for %s: %s", student_id, e)
        return jsonify({"error": str(e)}), 500

    if not deleted:
        return jsonify({"error": "Student not found"}), 404
    return jsonify({"deleted": student_id})
