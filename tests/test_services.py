import pytest
from sqlalchemy.exc import IntegrityError

from errors import CredentialNameError, NotFoundError
from factories import create_credential, create_user
from models import db
from repositories import CredentialRepository, NetworkRepository
from services import CredentialService, NetworkService


@pytest.fixture
def credential_service(app, cipher):
    with app.app_context():
        yield CredentialService(CredentialRepository(db.session), cipher)


@pytest.fixture
def network_service(app, cipher):
    with app.app_context():
        yield NetworkService(NetworkRepository(db.session), cipher)


def test_list_raises_not_found_when_empty(app, credential_service):
    user = create_user(app)
    with pytest.raises(NotFoundError):
        credential_service.list(user["id"])


def test_list_reveals_without_touching_stored_rows(app, credential_service):
    user = create_user(app)
    stored = create_credential(app, user, password="plain")

    [item] = credential_service.list(user["id"])

    assert item["password"] == "plain"
    record = credential_service.repository.find_by_id(stored["id"])
    assert record.password == stored["password"]


def test_locate_hides_foreign_records(app, credential_service):
    foreign = create_credential(app)
    me = create_user(app)
    with pytest.raises(NotFoundError):
        credential_service.locate(me["id"], foreign["id"])


def test_create_encrypts_password(app, network_service, cipher):
    user = create_user(app)

    record = network_service.create(user["id"], "Home", "SSID", "wifi-pass")

    assert record.password != "wifi-pass"
    assert cipher.decrypt(record.password) == "wifi-pass"


def test_create_rejects_duplicate_title(app, network_service):
    user = create_user(app)
    network_service.create(user["id"], "Home", "SSID", "a")
    with pytest.raises(CredentialNameError):
        network_service.create(user["id"], "Home", "Other", "b")


def test_insert_race_surfaces_as_name_conflict(app, credential_service, monkeypatch):
    user = create_user(app)
    # Simulate a concurrent insert that slipped past the pre-check
    monkeypatch.setattr(credential_service.repository, "find_by_title", lambda *a, **kw: None)
    credential_service.create(user["id"], "Bank", "https://b", "u", "p")

    with pytest.raises(CredentialNameError):
        credential_service.create(user["id"], "Bank", "https://b", "u", "p")
    assert len(credential_service.repository.list_by_user(user["id"])) == 1


def test_delete_checks_ownership_before_deleting(app, credential_service):
    foreign = create_credential(app)
    me = create_user(app)

    with pytest.raises(NotFoundError):
        credential_service.delete(me["id"], foreign["id"])
    assert credential_service.repository.find_by_id(foreign["id"]) is not None


def test_delete_removes_owned_record(app, credential_service):
    user = create_user(app)
    stored = create_credential(app, user)

    credential_service.delete(user["id"], stored["id"])

    with pytest.raises(NotFoundError):
        credential_service.locate(user["id"], stored["id"])


def test_integrity_error_is_not_leaked(app, credential_service, monkeypatch):
    user = create_user(app)

    def boom(data):
        raise IntegrityError("INSERT", {}, Exception("unique"))

    monkeypatch.setattr(credential_service.repository, "create", boom)
    with pytest.raises(CredentialNameError):
        credential_service.create(user["id"], "T", "https://t", "u", "p")
