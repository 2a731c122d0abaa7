from sqlalchemy.orm.exc import NoResultFound

from factories import auth_header, create_credential, create_user, generate_valid_token
from repositories import CredentialRepository
from utils import CipherError


def test_unknown_route_is_json_404(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.get_json()["name"] == "NotFound"


def test_method_not_allowed(app, client):
    token = generate_valid_token(app)
    response = client.put("/credentials", headers=auth_header(token))
    assert response.status_code == 405


def test_storage_error_becomes_generic_500(app, client, monkeypatch):
    user = create_user(app)
    token = generate_valid_token(app, user)
    credential = create_credential(app, user)

    def fail(self, record_id):
        raise NoResultFound("row vanished")

    monkeypatch.setattr(CredentialRepository, "delete", fail)
    response = client.delete(f"/credentials/{credential['id']}", headers=auth_header(token))

    assert response.status_code == 500
    assert response.get_json() == {
        "name": "InternalServerError",
        "message": "Internal Server Error",
    }


def test_cipher_failure_does_not_leak_details(app, client, cipher, monkeypatch):
    user = create_user(app)
    token = generate_valid_token(app, user)
    create_credential(app, user)

    def fail(ciphertext):
        raise CipherError("key mismatch for row 1")

    monkeypatch.setattr(cipher, "decrypt", fail)
    response = client.get("/credentials", headers=auth_header(token))

    assert response.status_code == 500
    assert "key mismatch" not in response.get_data(as_text=True)


def test_out_of_range_delete_is_404_not_500(app, client):
    token = generate_valid_token(app)
    response = client.delete("/networks/99999999999999999999", headers=auth_header(token))
    assert response.status_code == 404
    assert response.get_json()["name"] == "NotFoundError"
