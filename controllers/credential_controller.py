from http import HTTPStatus

from flask import Blueprint, current_app, g, jsonify

from middlewares import validate_body
from models import db
from repositories import CredentialRepository
from schemas import NewCredentialSchema
from services import CredentialService

credentials_bp = Blueprint('credentials', __name__, url_prefix='/credentials')


def _service():
    return CredentialService(CredentialRepository(db.session), current_app.extensions['cipher'])


@credentials_bp.get('')
def credentials_list():
    credentials = _service().list(g.user_id)
    return jsonify(credentials), HTTPStatus.OK


@credentials_bp.get('/<int:credential_id>')
def credentials_locate(credential_id):
    credential = _service().locate(g.user_id, credential_id)
    # Existing clients read the single match out of an array
    return jsonify([credential]), HTTPStatus.OK


@credentials_bp.post('')
@validate_body(NewCredentialSchema)
def credentials_store():
    body = g.body
    credential = _service().create(g.user_id, body.title, body.url, body.username, body.password)
    return jsonify({'credentialId': credential.id}), HTTPStatus.CREATED


@credentials_bp.delete('/<int:credential_id>')
def credentials_delete(credential_id):
    _service().delete(g.user_id, credential_id)
    return '', HTTPStatus.ACCEPTED
