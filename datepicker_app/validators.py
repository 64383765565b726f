from wtforms.validators import StopValidation

from datepicker_app.fields import DatePickerField
from datepicker_app.functions import is_empty, is_in_range
from datepicker_app.rules import DateRange, IfFilled


class InvalidStateError(RuntimeError):
    """A date picker validator was attached to some other kind of field."""


def _ensure_date_picker(field):
    if not isinstance(field, DatePickerField):
        raise InvalidStateError(f"Unable to validate {type(field).__name__} instance.")


# ------------------------
# Predicates
# ------------------------

def validate_filled(field):
    """Did the user enter anything? (the value doesn't have to be valid)"""
    _ensure_date_picker(field)
    return not is_empty(field.raw_value)


def validate_valid(field):
    """Is the entered value a date? (empty value is also valid)"""
    _ensure_date_picker(field)
    return is_empty(field.raw_value) or field.data is not None


def validate_range(field, range_):
    """Is the entered date within (min, max)?"""
    _ensure_date_picker(field)
    return is_in_range(field.data, range_)


# ------------------------
# WTForms validators
# ------------------------

class Filled:
    """Stops the validation chain when nothing was entered."""
    field_flags = {'required': True}

    def __init__(self, message=None):
        self.message = message

    def __call__(self, form, field):
        if validate_filled(field):
            return

        message = self.message or field.gettext('This field is required.')
        field.errors[:] = []
        raise StopValidation(message)


class Valid:
    """Stops the validation chain when the entered text is not a date."""

    def __init__(self, message=None):
        self.message = message

    def __call__(self, form, field):
        if not validate_valid(field):
            raise StopValidation(self.message or field.gettext('Please enter a valid date.'))


__all__ = [
    'InvalidStateError',
    'validate_filled', 'validate_valid', 'validate_range',
    'Filled', 'Valid', 'DateRange', 'IfFilled',
]
