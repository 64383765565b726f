"""WTForms widget for the date picker field."""
from wtforms.widgets import Input

from datepicker_app.functions import format_date
from datepicker_app.rules import extract_range


def add_class_token(classes, token):
    """Append a CSS class token unless it is already present."""
    tokens = classes.split() if classes else []
    if token and token not in tokens:
        tokens.append(token)
    return ' '.join(tokens)


class DatePickerInput(Input):
    """
    Text input compatible with jQuery UI DatePicker.

    min/max come from the range rules attached to the field, value from the
    parsed date (or from the raw text when it did not parse).
    """
    input_type = 'text'
    validation_attrs = {'required', 'disabled', 'readonly'}

    def __call__(self, field, **kwargs):
        classes = ' '.join(filter(None, (kwargs.pop('class', None), kwargs.pop('class_', None))))
        kwargs['class'] = add_class_token(classes, field.class_name)

        low, high = extract_range(field.validators, field)
        if low is not None:
            kwargs['min'] = format_date(low)
        if high is not None:
            kwargs['max'] = format_date(high)
        if field.data:
            kwargs['value'] = format_date(field.data)

        return super().__call__(field, **kwargs)
