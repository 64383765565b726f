from flask_wtf import FlaskForm
from wtforms import SelectField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional, ValidationError

from datepicker_app.fields import DatePickerField
from datepicker_app.validators import DateRange, Filled, IfFilled, Valid

# ------------------------
# Leave Forms
# ------------------------

class LeaveRequestForm(FlaskForm):
    leave_type = SelectField('Leave Type', choices=[
        ('Vacation', 'Vacation Leave'),
        ('Sick', 'Sick Leave'),
        ('Personal', 'Personal Leave'),
    ], validators=[DataRequired()])
    start_date = DatePickerField('Start Date', validators=[Filled(), Valid()])
    end_date = DatePickerField('End Date', validators=[Valid()])
    reason = TextAreaField('Reason', validators=[Optional(), Length(max=500)])
    submit = SubmitField('Submit Request')

    def __init__(self, *args, earliest=None, latest=None, **kwargs):
        super().__init__(*args, **kwargs)
        # Bounds known only per request; validator lists are shared with the class
        if earliest is not None or latest is not None:
            self.start_date.validators = [*self.start_date.validators, DateRange(min=earliest, max=latest)]
            self.end_date.validators = [*self.end_date.validators, IfFilled(DateRange(min=earliest, max=latest))]

    def validate_end_date(self, field):
        if field.data and self.start_date.data and field.data < self.start_date.data:
            raise ValidationError('End date must not be before the start date.')
