import os

from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL', 'sqlite:///' + os.path.join(basedir, 'database', 'drivenpass.db')
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET = os.environ.get('JWT_SECRET', 'top_secret')
    # Passphrase for the password cipher; without it the key file is used,
    # utils.crypto.KEY_PATH unless SECRET_KEY_PATH overrides it
    CRYPTR_SECRET = os.environ.get('CRYPTR_SECRET')
    SECRET_KEY_PATH = os.environ.get('SECRET_KEY_PATH')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
