# wsgi.py
from datepicker_app import create_app

app = create_app()
