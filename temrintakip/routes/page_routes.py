"""
Browser UI routes for TemrinTakip.
Dashboard, student list and the add/edit form.
"""
import logging
from flask import Blueprint, request, render_template, redirect, url_for, flash

from temrintakip.config import config
from temrintakip.services import student_service
from temrintakip.services.charts import build_dashboard_charts
from temrintakip.students import (
    Gender, SCORE_KEYS, StudentValidationError,
    normalize_student_form, normalize_scores, empty_form, filter_students,
)
from .analytics_routes import current_stats, get_last_analysis, run_analysis

page_bp = Blueprint('pages', __name__)
logger = logging.getLogger(__name__)


def _submitted_form():
    """Echo back what the user typed so a rejected form keeps its values."""
    data = request.form
    return {
        "student_no": data.get("student_no", ""),
        "full_name": data.get("full_name", ""),
        "gender": data.get("gender", Gender.MALE.value),
        "scores": normalize_scores(data),
    }


def _render_form(form, student=None, status=200):
    return render_template(
        'student_form.html',
        form=form,
        student=student,
        genders=list(Gender),
        score_keys=SCORE_KEYS,
        active_tab='list',
    ), status


# ============ Dashboard ============

@page_bp.route('/')
def dashboard():
    stats = current_stats()
    return render_template(
        'dashboard.html',
        stats=stats,
        charts=build_dashboard_charts(stats),
        analysis=get_last_analysis(),
        pass_threshold=config.pass_threshold,
        active_tab='dashboard',
    )


@page_bp.route('/analysis', methods=['POST'])
def request_analysis():
    stats = current_stats()
    if stats is not None:
        _, succeeded = run_analysis(stats)
        if not succeeded:
            flash('Analiz şu anda alınamadı.', 'info')
    return redirect(url_for('pages.dashboard'))


# ============ Students ============

@page_bp.route('/students')
def student_list():
    term = request.args.get('q', '').strip()
    students = filter_students(student_service.get_all(), term)
    return render_template(
        'student_list.html',
        students=students,
        search=term,
        score_keys=SCORE_KEYS,
        pass_threshold=config.pass_threshold,
        male=Gender.MALE.value,
        active_tab='list',
    )


@page_bp.route('/students/new', methods=['GET', 'POST'])
def new_student():
    if request.method == 'GET':
        return _render_form(empty_form())

    try:
        form = normalize_student_form(request.form)
    except StudentValidationError as e:
        flash(str(e), 'error')
        return _render_form(_submitted_form(), status=400)

    try:
        student_service.add(form)
    except Exception as e:
        logger.error("Create student error: %s", e)
        flash('Öğrenci kaydedilemedi: ' + str(e), 'error')
        return _render_form(form, status=500)

    flash('Öğrenci kaydedildi.', 'success')
    return redirect(url_for('pages.student_list'))


@page_bp.route('/students/<student_id>/edit', methods=['GET', 'POST'])
def edit_student(student_id):
    try:
        student = student_service.get(student_id)
    except Exception as e:
        logger.error("Get student error for %s: %s", student_id, e)
        student = None

    if student is None:
        flash('Öğrenci bulunamadı.', 'error')
        return redirect(url_for('pages.student_list'))

    if request.method == 'GET':
        return _render_form(student, student=student)

    try:
        form = normalize_student_form(request.form)
    except StudentValidationError as e:
        flash(str(e), 'error')
        return _render_form(_submitted_form(), student=student, status=400)

    try:
        updated = student_service.update(student_id, form)
    except Exception as e:
        logger.error("Update student error for %s: %s", student_id, e)
        flash('Öğrenci güncellenemedi: ' + str(e), 'error')
        return _render_form(form, student=student, status=500)

    if updated is None:
        flash('Öğrenci bulunamadı.', 'error')
    else:
        flash('Öğrenci güncellendi.', 'success')
    return redirect(url_for('pages.student_list'))


@page_bp.route('/students/<student_id>/delete', methods=['POST'])
def delete_student(student_id):
    try:
        if student_service.delete(student_id):
            flash('Öğrenci silindi.', 'success')
        else:
            flash('Öğrenci bulunamadı.', 'error')
    except Exception as e:
        logger.error("Delete student error for %s: %s", student_id, e)
        flash('Öğrenci silinemedi: ' + str(e), 'error')
    return redirect(url_for('pages.student_list'))
