from collections.abc import Mapping

from flask import Flask, jsonify

from .extensions import bcrypt, db, login_manager, socketio

DEFAULT_CONFIG = 'darkflix.config.Config'


def create_app(config_object=None, clock=None):
    """Build the Flask app.

    ``config_object`` may be a config class, an import string or a mapping of
    overrides applied on top of the default config. ``clock`` replaces the
    watch party's millisecond clock, mostly for tests.
    """
    app = Flask(__name__)
    app.config.from_object(DEFAULT_CONFIG)
    if isinstance(config_object, Mapping):
        app.config.update(config_object)
    elif config_object is not None:
        app.config.from_object(config_object)

    # Socket handlers must be registered before SocketIO binds to the app
    from .party import events  # noqa: F401

    db.init_app(app)
    login_manager.init_app(app)
    bcrypt.init_app(app)
    socketio.init_app(app, cors_allowed_origins="*")

    # Import blueprints
    from .auth.routes import auth_bp
    from .account.routes import account_bp
    from .party.routes import party_bp
    from .party.registry import init_registry
    from .party.tasks import start_background_tasks

    # Register blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(account_bp)
    app.register_blueprint(party_bp)

    registry = init_registry(app, clock=clock)
    start_background_tasks(app, registry)

    @app.route('/config')
    def client_config():
        return jsonify({'tmdbApiKey': app.config.get('TMDB_API_KEY', '')})

    @app.errorhandler(404)
    def page_not_found(e):
        return jsonify({'error': 'Not found'}), 404

    # Flask has already logged the traceback through app.log_exception
    @app.errorhandler(500)
    def server_error(e):
        return jsonify({'error': 'Something went wrong.'}), 500

    return app
