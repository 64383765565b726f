from flask import current_app, has_app_context
from wtforms.fields import Field

from datepicker_app.functions import normalize_date
from datepicker_app.widgets import DatePickerInput

DEFAULT_CLASS_NAME = 'date'


class DatePickerField(Field):
    """
    Form field for selecting a date.

    Accepts loosely typed text ("5.3.2024", "5-3", "5 3 2024"), integer
    timestamps and date objects. `data` holds a date or None, `raw_value`
    keeps whatever was entered so "filled" checks work for invalid input.
    """
    widget = DatePickerInput()

    def __init__(self, label=None, validators=None, class_name=None, **kwargs):
        self._class_name = class_name
        self.raw_value = None
        super().__init__(label, validators, **kwargs)

    @property
    def class_name(self):
        """CSS class token added to the rendered input."""
        if self._class_name is not None:
            return self._class_name
        if has_app_context():
            return current_app.config.get('DATEPICKER_CLASS_NAME', DEFAULT_CLASS_NAME)
        return DEFAULT_CLASS_NAME

    @class_name.setter
    def class_name(self, value):
        self._class_name = value

    def set_value(self, value):
        self.data, self.raw_value = normalize_date(value)
        return self

    def process_data(self, value):
        self.set_value(value)

    def process_formdata(self, valuelist):
        if valuelist:
            self.set_value(valuelist[0])

    def _value(self):
        return self.raw_value or ''
