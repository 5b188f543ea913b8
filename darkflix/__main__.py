import logging
import os

from . import create_app
from .extensions import db, socketio


def main():
    app = create_app()
    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))
    with app.app_context():
        db.create_all()

    host = os.environ.get('HOST', '127.0.0.1')
    port = int(os.environ.get('PORT', 3000))
    app.logger.info(f"Darkflix running on http://{host}:{port}")
    socketio.run(app, host=host, port=port, use_reloader=False, allow_unsafe_werkzeug=True)


if __name__ == "__main__":
    main()
