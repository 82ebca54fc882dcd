import pytest
from pydantic import ValidationError

from google_admin_mcp.models import AddUserRequest, ListUsersRequest, UserKeyRequest


def test_list_users_request_valid():
    req = ListUsersRequest(domain="example.com")
    assert req.domain == "example.com"


@pytest.mark.parametrize("domain", ["", "   "])
def test_list_users_request_rejects_empty_domain(domain):
    with pytest.raises(ValidationError):
        ListUsersRequest(domain=domain)


def test_add_user_request_valid():
    req = AddUserRequest(
        primaryEmail="jane.doe@example.com", firstName="Jane", lastName="Doe"
    )
    assert req.primaryEmail == "jane.doe@example.com"
    assert req.firstName == "Jane"


@pytest.mark.parametrize(
    "field,value",
    [
        ("primaryEmail", "not-an-email"),
        ("primaryEmail", "missing-domain@"),
        ("primaryEmail", ""),
        ("firstName", ""),
        ("lastName", "  "),
    ],
)
def test_add_user_request_invalid_fields(field, value):
    data = {
        "primaryEmail": "jane.doe@example.com",
        "firstName": "Jane",
        "lastName": "Doe",
    }
    data[field] = value
    with pytest.raises(ValidationError):
        AddUserRequest(**data)


def test_user_key_request_accepts_email_or_id():
    assert UserKeyRequest(userKey="jane@example.com").userKey == "jane@example.com"
    assert UserKeyRequest(userKey="104857284828171").userKey == "104857284828171"


def test_user_key_request_rejects_empty():
    with pytest.raises(ValidationError):
        UserKeyRequest(userKey="")
