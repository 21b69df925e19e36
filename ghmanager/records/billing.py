"""Billing records"""

from __future__ import annotations

import msgspec

from .base import GitHubResponse, Record


class MinutesUsedBreakdown(Record):
    """Minutes used per runner operating system"""

    ubuntu: int | None = msgspec.field(default=None, name="UBUNTU")
    macos: int | None = msgspec.field(default=None, name="MACOS")
    windows: int | None = msgspec.field(default=None, name="WINDOWS")
    ubuntu_4_core: int | None = None
    ubuntu_8_core: int | None = None
    ubuntu_16_core: int | None = None
    ubuntu_32_core: int | None = None
    ubuntu_64_core: int | None = None
    windows_4_core: int | None = None
    windows_8_core: int | None = None
    windows_16_core: int | None = None
    windows_32_core: int | None = None
    windows_64_core: int | None = None
    macos_12_core: int | None = None
    total: int | None = None


class ActionsBilling(GitHubResponse):
    total_minutes_used: int | None = None
    total_paid_minutes_used: float | None = None
    included_minutes: int | None = None
    minutes_used_breakdown: MinutesUsedBreakdown | None = None


class PackagesBilling(GitHubResponse):
    total_gigabytes_bandwidth_used: int | None = None
    total_paid_gigabytes_bandwidth_used: int | None = None
    included_gigabytes_bandwidth: int | None = None


class SharedStorageBilling(GitHubResponse):
    days_left_in_billing_cycle: int | None = None
    estimated_paid_storage_for_month: float | None = None
    estimated_storage_for_month: float | None = None


class CommitterBreakdown(Record):
    user_login: str | None = None
    last_pushed_date: str | None = None


class SecurityRepository(Record):
    name: str | None = None
    advanced_security_committers: int | None = None
    advanced_security_committers_breakdown: list[CommitterBreakdown] = msgspec.field(
        default_factory=list
    )


class AdvancedSecurityCommitters(GitHubResponse):
    total_advanced_security_committers: int | None = None
    total_count: int | None = None
    repositories: list[SecurityRepository] = msgspec.field(default_factory=list)
