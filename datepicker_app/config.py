import os


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'datepicker-dev-key'

    WTF_CSRF_ENABLED = os.environ.get('WTF_CSRF_ENABLED', '1') != '0'

    # CSS class token added to every date picker input
    DATEPICKER_CLASS_NAME = os.environ.get('DATEPICKER_CLASS_NAME') or 'date'

    # Latest date accepted by the leave request form
    LEAVE_MAX_DAYS_AHEAD = int(os.environ.get('LEAVE_MAX_DAYS_AHEAD', 365))


class TestConfig(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False
    SECRET_KEY = 'test-key'
