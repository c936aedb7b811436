"""Tests for the role order and the authorization gate."""

from datetime import datetime, timezone

import pytest

from shopfront.core.auth import authorize
from shopfront.core.errors import AuthError, ForbiddenError
from shopfront.domains.identity.entities import Identity, Role


def make_identity(role: Role) -> Identity:
    return Identity(
        user_id="user-1",
        email="a@example.com",
        role=role,
        expires_at=datetime(2100, 1, 1, tzinfo=timezone.utc),
    )


class TestRole:
    def test_admin_grants_editor(self):
        assert Role.admin.grants(Role.editor)

    def test_editor_does_not_grant_admin(self):
        assert not Role.editor.grants(Role.admin)

    def test_each_role_grants_itself(self):
        for role in Role:
            assert role.grants(role)

    def test_parse(self):
        assert Role.parse("admin") is Role.admin
        assert Role.parse("root") is None


class TestAuthorize:
    def test_missing_identity_is_unauthenticated(self):
        with pytest.raises(AuthError):
            authorize(Role.editor)(None)

    def test_editor_denied_admin_gate(self):
        with pytest.raises(ForbiddenError) as exc_info:
            authorize(Role.admin)(make_identity(Role.editor))

        assert exc_info.value.status_code == 403

    def test_admin_passes_editor_gate(self):
        identity = make_identity(Role.admin)

        assert authorize(Role.editor)(identity) is identity

    def test_editor_passes_editor_gate(self):
        identity = make_identity(Role.editor)

        assert authorize(Role.editor)(identity) is identity
