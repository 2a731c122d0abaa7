from http import HTTPStatus

from flask import Blueprint, current_app, g, jsonify

from middlewares import validate_body
from models import db
from repositories import SessionRepository, UserRepository
from schemas import SignInSchema
from services import AuthenticationService

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')


@auth_bp.post('/sign-in')
@validate_body(SignInSchema)
def sign_in_post():
    service = AuthenticationService(
        UserRepository(db.session),
        SessionRepository(db.session),
        current_app.config['JWT_SECRET'],
    )
    result = service.sign_in(g.body.email, g.body.password)
    return jsonify(result), HTTPStatus.OK
