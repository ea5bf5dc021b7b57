import pytest

from mdm_core.iam.models import Role
from mdm_core.iam.scope import TenantDenied, scope_owner
from mdm_core.iam.session import Identity


def _identity(role, *, user_id=7, physician_id=None):
    return Identity(
        user_id=user_id,
        email="u@example.com",
        role=role,
        physician_id=physician_id,
        expires_at=None,
        refresh_expires_at=None,
    )


def test_physician_owns_their_own_rows():
    assert scope_owner(_identity(Role.PHYSICIAN, user_id=3)) == 3


def test_physician_ignores_stray_physician_link():
    assert scope_owner(_identity(Role.PHYSICIAN, user_id=3, physician_id=99)) == 3


def test_staff_scoped_to_linked_physician():
    assert scope_owner(_identity(Role.STAFF, user_id=8, physician_id=3)) == 3


def test_staff_without_link_is_denied():
    with pytest.raises(TenantDenied) as exc:
        scope_owner(_identity(Role.STAFF))
    assert exc.value.reason == TenantDenied.PHYSICIAN_LINK_MISSING


def test_attorney_denied_by_default():
    with pytest.raises(TenantDenied) as exc:
        scope_owner(_identity(Role.ATTORNEY, physician_id=3))
    assert exc.value.reason == TenantDenied.ROLE_NOT_PERMITTED


def test_attorney_allowed_when_route_whitelists_it():
    allow = frozenset({Role.PHYSICIAN, Role.STAFF, Role.ATTORNEY})
    assert scope_owner(_identity(Role.ATTORNEY, physician_id=3), allow=allow) == 3


def test_role_outside_allow_list_is_denied():
    with pytest.raises(TenantDenied) as exc:
        scope_owner(_identity(Role.STAFF, physician_id=3), allow=frozenset({Role.PHYSICIAN}))
    assert exc.value.reason == TenantDenied.ROLE_NOT_PERMITTED


def test_unknown_role_value_cannot_be_built():
    with pytest.raises(ValueError):
        Role("Janitor")
