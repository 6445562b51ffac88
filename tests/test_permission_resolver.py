"""Tests for effective permission resolution."""

from dataclasses import dataclass, field

import pytest

from fieldops.permissions import (
    ALL_PERMISSIONS,
    FallbackPolicy,
    PermissionSource,
    PermissionState,
    RolePreview,
    get_default_template,
    resolve_permissions,
)


@dataclass
class Person:
    email: str
    role: str


@dataclass
class StoredRole:
    role: str
    permissions: list[str] = field(default_factory=list)


@dataclass
class Identity:
    email: str


EMPLOYEES = [
    Person("jane@co.com", "Foreman"),
    Person("owner@co.com", "Admin"),
    Person("lou@co.com", "labourer"),
    Person("sam@co.com", "Field Crew"),
]

FOREMAN = frozenset(get_default_template("Foreman").permissions)


class TestResolution:
    """Stored record, then template, then fallback."""

    def test_template_when_nothing_stored(self):
        resolved = resolve_permissions("jane@co.com", EMPLOYEES, [])

        assert resolved.role.display == "Foreman"
        assert resolved.source is PermissionSource.TEMPLATE
        assert resolved.permissions == FOREMAN
        assert resolved.can("time-tracking.approve")
        assert not resolved.can("settings.manage-roles")

    def test_stored_record_overrides_template(self):
        stored = [StoredRole("Foreman", ["time-tracking.view"])]

        resolved = resolve_permissions("jane@co.com", EMPLOYEES, stored)

        assert resolved.source is PermissionSource.STORED
        assert resolved.permissions == {"time-tracking.view"}

    def test_stored_record_matches_case_insensitively(self):
        stored = [StoredRole("FOREMAN", ["dashboard.view"])]

        resolved = resolve_permissions("jane@co.com", EMPLOYEES, stored)

        assert resolved.permissions == {"dashboard.view"}

    def test_template_matches_case_insensitively(self):
        resolved = resolve_permissions("lou@co.com", EMPLOYEES, [])

        assert resolved.source is PermissionSource.TEMPLATE
        assert resolved.permissions == set(get_default_template("Labourer").permissions)

    def test_empty_stored_list_grants_nothing(self):
        resolved = resolve_permissions("jane@co.com", EMPLOYEES, [StoredRole("Foreman")])

        assert resolved.source is PermissionSource.STORED
        assert resolved.permissions == frozenset()

    def test_custom_role_without_template(self):
        stored = [StoredRole("Field Crew", ["field.view"])]

        resolved = resolve_permissions("sam@co.com", EMPLOYEES, stored)

        assert resolved.permissions == {"field.view"}

    def test_identity_object(self):
        resolved = resolve_permissions(Identity("jane@co.com"), EMPLOYEES, [])
        assert resolved.employee is EMPLOYEES[0]


class TestFallback:
    """Callers whose role matches nothing."""

    def test_unknown_caller_gets_full_access(self):
        resolved = resolve_permissions("stranger@co.com", EMPLOYEES, [])

        assert resolved.employee is None
        assert resolved.role.is_empty
        assert resolved.source is PermissionSource.FALLBACK
        assert resolved.permissions == set(ALL_PERMISSIONS)

    def test_no_identity_gets_full_access(self):
        resolved = resolve_permissions(None, [], [])
        assert resolved.permissions == set(ALL_PERMISSIONS)

    def test_untemplated_role_gets_full_access(self):
        resolved = resolve_permissions("sam@co.com", EMPLOYEES, [])
        assert resolved.source is PermissionSource.FALLBACK
        assert resolved.can("settings.manage-roles")

    def test_fail_closed_policy(self):
        resolved = resolve_permissions(
            "stranger@co.com", EMPLOYEES, [], fallback=FallbackPolicy.NO_ACCESS
        )
        assert resolved.permissions == frozenset()

    def test_email_match_is_case_sensitive(self):
        resolved = resolve_permissions("Jane@co.com", EMPLOYEES, [])

        assert resolved.employee is None
        assert resolved.source is PermissionSource.FALLBACK


class TestLoading:
    """Nothing is granted until both collections have arrived."""

    @pytest.mark.parametrize("employees, stored", [(None, []), (EMPLOYEES, None), (None, None)])
    def test_loading_grants_nothing(self, employees, stored):
        resolved = resolve_permissions("owner@co.com", employees, stored)

        assert resolved.loading
        assert resolved.source is PermissionSource.LOADING
        assert not resolved.can("dashboard.view")


class TestPreviewResolution:
    """Preview replaces the real role for resolution only."""

    def test_preview_role_is_used(self):
        resolved = resolve_permissions(
            "owner@co.com", EMPLOYEES, [], preview_role="Labourer"
        )

        assert resolved.is_previewing
        assert resolved.role.display == "Labourer"
        assert resolved.real_role.display == "Admin"
        assert not resolved.can("settings.view")

    def test_preview_uses_stored_records(self):
        stored = [StoredRole("Field Crew", ["field.view"])]

        resolved = resolve_permissions(
            "owner@co.com", EMPLOYEES, stored, preview_role="field crew"
        )

        assert resolved.permissions == {"field.view"}
        assert resolved.source is PermissionSource.STORED

    def test_preview_does_not_affect_other_callers(self):
        admin = resolve_permissions("owner@co.com", EMPLOYEES, [], preview_role="Labourer")
        other = resolve_permissions("jane@co.com", EMPLOYEES, [])

        assert admin.role.display == "Labourer"
        assert other.permissions == FOREMAN

    def test_non_admin_preview_is_ignored(self):
        resolved = resolve_permissions("lou@co.com", EMPLOYEES, [], preview_role="Owner")

        assert not resolved.is_previewing
        assert resolved.role.display == "labourer"
        assert resolved.source is PermissionSource.TEMPLATE
        assert not resolved.can("settings.manage-roles")

    def test_demoted_admin_loses_preview(self):
        preview = RolePreview()
        preview.start_preview("Owner", "Admin")
        state = PermissionState(identity="owner@co.com", preview=preview)
        state.update_role_permissions([])
        state.update_employees(EMPLOYEES)
        assert state.can("settings.manage-roles")

        state.update_employees([Person("owner@co.com", "Labourer")])

        resolved = state.resolve()
        assert resolved.role.display == "Labourer"
        assert not resolved.is_previewing
        assert not resolved.can("settings.manage-roles")

    def test_unconfigured_owner_may_preview(self):
        resolved = resolve_permissions("new@co.com", EMPLOYEES, [], preview_role="Foreman")

        assert resolved.is_previewing
        assert resolved.permissions == FOREMAN


class TestPermissionState:
    """Snapshots arriving in any order."""

    def test_loading_until_both_snapshots(self):
        state = PermissionState(identity="jane@co.com")
        assert state.resolve().loading

        state.update_role_permissions([])
        assert state.resolve().loading

        state.update_employees(EMPLOYEES)
        assert state.resolve().permissions == FOREMAN

    def test_new_snapshot_recomputes(self):
        state = PermissionState(identity="jane@co.com")
        state.update_employees(EMPLOYEES)
        state.update_role_permissions([])
        assert state.can("time-tracking.approve")

        state.update_role_permissions([StoredRole("Foreman", ["dashboard.view"])])
        assert not state.can("time-tracking.approve")

        state.update_employees([Person("jane@co.com", "PM")])
        assert state.can("time-tracking.approve")
        assert state.resolve().role.display == "PM"

    def test_follows_preview(self):
        preview = RolePreview()
        state = PermissionState(identity="owner@co.com", preview=preview)
        state.update_employees(EMPLOYEES)
        state.update_role_permissions([])

        preview.start_preview("Labourer", "Admin")
        assert not state.can("settings.view")

        preview.stop_preview()
        assert state.can("settings.view")
