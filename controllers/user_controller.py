from http import HTTPStatus

from flask import Blueprint, g, jsonify

from middlewares import validate_body
from models import db
from repositories import UserRepository
from schemas import SignUpSchema
from services import UserService

users_bp = Blueprint('users', __name__, url_prefix='/users')


@users_bp.post('')
@validate_body(SignUpSchema)
def users_post():
    user = UserService(UserRepository(db.session)).create_user(g.body.email, g.body.password)
    return jsonify(user.to_dict()), HTTPStatus.CREATED
