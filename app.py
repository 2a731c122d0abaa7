import os

from flask import Flask
from loguru import logger

from config import Config, basedir
from controllers import auth_bp, credentials_bp, health_bp, networks_bp, users_bp
from errors import register_error_handlers
from middlewares import require_token
from models import db
from utils import Cipher, setup_logging


def _ensure_sqlite_dir(uri: str) -> None:
    if uri.startswith('sqlite:///') and ':memory:' not in uri:
        os.makedirs(os.path.dirname(uri[len('sqlite:///'):]), exist_ok=True)


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    setup_logging(app.config['LOG_LEVEL'])

    db.init_app(app)
    # Key is loaded once and only read afterwards
    app.extensions['cipher'] = Cipher.from_config(app.config)

    for blueprint in (health_bp, users_bp, auth_bp, credentials_bp, networks_bp):
        app.register_blueprint(blueprint)
    require_token(app)
    register_error_handlers(app)

    with app.app_context():
        _ensure_sqlite_dir(app.config['SQLALCHEMY_DATABASE_URI'])
        db.create_all()

    logger.info('DrivenPass API ready (base dir {})', basedir)
    return app


if __name__ == '__main__':
    create_app().run(debug=True)
