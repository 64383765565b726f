from datetime import date, timedelta

from flask import Blueprint, render_template, flash, current_app

from datepicker_app.forms import LeaveRequestForm
from datepicker_app.functions import format_date

form_bp = Blueprint('datepicker_form', __name__)


@form_bp.route('/leave', methods=['GET', 'POST'])
def leave_request():
    today = date.today()
    latest = today + timedelta(days=current_app.config['LEAVE_MAX_DAYS_AHEAD'])
    form = LeaveRequestForm(earliest=today, latest=latest)

    if form.validate_on_submit():
        start = form.start_date.data
        end = form.end_date.data or start
        current_app.logger.info(f"Leave request {form.leave_type.data}: {start} to {end}")
        flash(f'Leave request submitted for {format_date(start)} - {format_date(end)}.', 'success')
        return render_template('datepicker/leave_request.html', form=form, submitted=True), 200

    for field_name, errors in form.errors.items():
        label = form[field_name].label.text if field_name else "Form"
        for error in errors:
            flash(f"{label}: {error}", "danger")

    status = 400 if form.is_submitted() else 200
    return render_template('datepicker/leave_request.html', form=form, submitted=False), status
