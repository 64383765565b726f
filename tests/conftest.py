from __future__ import annotations

import sys
from pathlib import Path

import pytest
from werkzeug.datastructures import MultiDict
from wtforms import Form, StringField

# Ensure project root is importable as a module path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from datepicker_app import create_app
from datepicker_app.config import TestConfig
from datepicker_app.fields import DatePickerField


@pytest.fixture()
def app():
    """Flask app with CSRF disabled."""
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


def make_form(*validators, other_fields=None, **field_kwargs):
    """Build a plain WTForms form class with a single `when` date picker field."""
    attrs = {'when': DatePickerField('When', validators=list(validators), **field_kwargs)}
    for name in other_fields or ():
        attrs[name] = StringField(name)
    return type('DateForm', (Form,), attrs)


def submit(form_class, **data):
    return form_class(MultiDict(data))
