# datepicker_app/__init__.py
from flask import Flask, redirect, url_for


def create_app(config_class=None):
    app = Flask(__name__)

    # Load global config
    from datepicker_app.config import Config
    app.config.from_object(config_class or Config)

    # -----------------------------
    # Register Blueprints
    # -----------------------------
    from datepicker_app.blueprints.datepicker.routes.form_routes import form_bp
    from datepicker_app.blueprints.datepicker.routes.api_routes import api_bp

    app.register_blueprint(form_bp, url_prefix='/datepicker')
    app.register_blueprint(api_bp, url_prefix='/api/datepicker')

    # -----------------------------
    # Root route
    # -----------------------------
    @app.route("/")
    def index():
        return redirect(url_for('datepicker_form.leave_request'))

    return app
