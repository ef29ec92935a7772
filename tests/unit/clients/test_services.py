"""Unit tests for ClientService."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.clients.dtos import CreateClientDTO, UpdateClientDTO
from modules.clients.exceptions import ClientAlreadyExists, ClientNotFound
from modules.clients.models import Client, ClientStatus
from modules.clients.repositories import ClientDjangoRepository
from modules.clients.services import ClientService
from modules.core.deletion import DeletionOutcome

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return ClientService(repository=ClientDjangoRepository())


def _create_dto(**overrides):
    data = {
        "name": "Ana Souza",
        "email": "Ana@Example.com",
        "phone": "+5511988880001",
        "address": "Rua das Flores 10",
    }
    data.update(overrides)
    return CreateClientDTO(**data)


class TestClientService:
    def test_create_lowercases_email(self, service):
        client = service.create_client(_create_dto())

        assert client.email == "ana@example.com"
        assert client.status == ClientStatus.ACTIVE

    def test_duplicate_email_is_case_insensitive(self, service):
        service.create_client(_create_dto())

        with pytest.raises(ClientAlreadyExists):
            service.create_client(_create_dto(email="ANA@example.com"))

    def test_invalid_phone(self):
        with pytest.raises(ValidationError):
            _create_dto(phone="12-34")

    def test_update_email_to_taken_address(self, service, make_client):
        make_client(email="taken@example.com")
        client = make_client()

        with pytest.raises(ClientAlreadyExists):
            service.update_client(str(client.id), UpdateClientDTO(email="taken@example.com"))

    def test_update_rejects_null_name(self):
        with pytest.raises(ValidationError):
            UpdateClientDTO(name=None)

    def test_update_status(self, service, make_client):
        client = make_client()

        updated = service.update_client(str(client.id), UpdateClientDTO(status="INACTIVE"))

        assert updated.is_active is False

    def test_delete_referenced_client_sets_inactive(self, service, make_client, make_order):
        client = make_client()
        make_order(client=client)

        result = service.delete_client(str(client.id))

        assert result.outcome == DeletionOutcome.DEACTIVATED
        client.refresh_from_db()
        assert client.status == ClientStatus.INACTIVE

    def test_delete_unreferenced_client(self, service, make_client):
        client = make_client()

        service.delete_client(str(client.id))

        assert not Client.objects.filter(id=client.id).exists()

    def test_get_missing_client(self, service):
        with pytest.raises(ClientNotFound):
            service.get_client("0190a0e0-0000-7000-8000-000000000000")
