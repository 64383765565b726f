from wtforms.validators import ValidationError

from datepicker_app.functions import format_date, is_empty, is_in_range


def is_field_filled(field):
    """Did the user enter anything? Date picker fields answer from raw input."""
    if hasattr(field, 'raw_value'):
        return not is_empty(field.raw_value)
    if field.raw_data:
        return not is_empty(field.raw_data[0])
    return not is_empty(field.data)


class DateRange:
    """
    Validates that the date lies within (min, max). Either end may be None.

    With negate=True the date must lie outside the range instead.
    """

    def __init__(self, min=None, max=None, message=None, negate=False):
        self.min = min
        self.max = max
        self.message = message
        self.negate = negate

    @property
    def range(self):
        return (self.min, self.max)

    def __call__(self, form, field):
        if is_in_range(field.data, self.range) != self.negate:
            return

        message = self.message
        if message is None:
            if self.negate:
                if self.max is None:
                    message = field.gettext('Date must be before %(min)s.')
                elif self.min is None:
                    message = field.gettext('Date must be after %(max)s.')
                else:
                    message = field.gettext('Date must not be between %(min)s and %(max)s.')
            elif self.max is None:
                message = field.gettext('Date must be on or after %(min)s.')
            elif self.min is None:
                message = field.gettext('Date must be on or before %(max)s.')
            else:
                message = field.gettext('Date must be between %(min)s and %(max)s.')

        raise ValidationError(message % dict(
            min=format_date(self.min) if self.min else '',
            max=format_date(self.max) if self.max else '',
        ))


class IfFilled:
    """
    Condition: runs the nested validators only when the target field is filled.

    The target is the validated field itself unless `other` names another
    field of the form. With negate=True the validators run when it is empty.
    """

    def __init__(self, *validators, other=None, negate=False):
        self.validators = list(validators)
        self.other = other
        self.negate = negate

    def targets(self, field):
        return self.other is None or self.other == field.short_name

    def __call__(self, form, field):
        target = form[self.other] if self.other else field
        if is_field_filled(target) == self.negate:
            return
        for validator in self.validators:
            validator(form, field)


def extract_range(rules, field):
    """
    Find the tightest (min, max) allowed by the rules attached to a field.

    Range rules nested under a "this field is filled" condition count too.
    """
    low = high = None
    for rule in rules:
        rule_range = None
        if isinstance(rule, DateRange):
            if not rule.negate:
                rule_range = rule.range
        elif isinstance(rule, IfFilled):
            if not rule.negate and rule.targets(field):
                rule_range = extract_range(rule.validators, field)

        if rule_range is None:
            continue

        rule_min, rule_max = rule_range
        if rule_min is not None and (low is None or rule_min > low):
            low = rule_min
        if rule_max is not None and (high is None or rule_max < high):
            high = rule_max

    return low, high
