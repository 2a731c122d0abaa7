from http import HTTPStatus

from flask import Blueprint, current_app, g, jsonify

from middlewares import validate_body
from models import db
from repositories import NetworkRepository
from schemas import NewNetworkSchema
from services import NetworkService

networks_bp = Blueprint('networks', __name__, url_prefix='/networks')


def _service():
    return NetworkService(NetworkRepository(db.session), current_app.extensions['cipher'])


@networks_bp.get('')
def networks_list():
    networks = _service().list(g.user_id)
    return jsonify(networks), HTTPStatus.OK


@networks_bp.get('/<int:network_id>')
def networks_locate(network_id):
    network = _service().locate(g.user_id, network_id)
    return jsonify([network]), HTTPStatus.OK


@networks_bp.post('')
@validate_body(NewNetworkSchema)
def networks_store():
    body = g.body
    network = _service().create(g.user_id, body.title, body.network, body.password)
    # Same response key as credentials, clients depend on it
    return jsonify({'credentialId': network.id}), HTTPStatus.CREATED


@networks_bp.delete('/<int:network_id>')
def networks_delete(network_id):
    _service().delete(g.user_id, network_id)
    return '', HTTPStatus.ACCEPTED
