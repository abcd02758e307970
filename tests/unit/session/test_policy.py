"""Tests for resolution error and update policies."""

import pytest

from artifact_session.session.policy import (
    CACHE_ALL,
    CACHE_DISABLED,
    CACHE_NOT_FOUND,
    CACHE_TRANSFER_ERROR,
    ResolutionErrorPolicy,
    compose_error_policy,
    new_error_policy,
    update_policy,
)


class TestComposeErrorPolicy:
    """Tests for compose_error_policy."""

    def test_not_found_only(self):
        """Test cache_not_found alone sets only the not-found bit."""
        base, fallback = compose_error_policy(True, False)

        assert base == CACHE_NOT_FOUND
        assert fallback == base

    def test_nothing_cached(self):
        """Test fallback still caches not-found when base caches nothing."""
        base, fallback = compose_error_policy(False, False)

        assert base == CACHE_DISABLED
        assert fallback == CACHE_NOT_FOUND

    def test_transfer_error_only(self):
        """Test cache_transfer_error is composed independently."""
        base, fallback = compose_error_policy(False, True)

        assert base == CACHE_TRANSFER_ERROR
        assert fallback == CACHE_ALL

    def test_both(self):
        """Test both flags set every bit."""
        assert compose_error_policy(True, True) == (CACHE_ALL, CACHE_ALL)

    @pytest.mark.parametrize("not_found", [True, False])
    @pytest.mark.parametrize("transfer_error", [True, False])
    def test_fallback_always_caches_not_found(self, not_found, transfer_error):
        """Test fallback is a superset of base with the not-found bit."""
        base, fallback = compose_error_policy(not_found, transfer_error)

        assert fallback & CACHE_NOT_FOUND
        assert fallback & base == base


class TestResolutionErrorPolicy:
    """Tests for the ResolutionErrorPolicy record."""

    def test_new_error_policy(self):
        """Test policy record carries base and fallback."""
        policy = new_error_policy(False, True)

        assert policy == ResolutionErrorPolicy(
            base_policy=CACHE_TRANSFER_ERROR, fallback_policy=CACHE_ALL
        )
        assert policy.caches_transfer_error
        assert not policy.caches_not_found

    def test_default(self):
        """Test the default policy caches not-found outcomes."""
        policy = ResolutionErrorPolicy()

        assert policy.caches_not_found
        assert not policy.caches_transfer_error


class TestUpdatePolicy:
    """Tests for update_policy."""

    def test_no_snapshot_updates(self):
        assert update_policy(True, False) == "never"

    def test_update_snapshots(self):
        assert update_policy(False, True) == "always"

    def test_unset(self):
        """Test neither flag leaves the policy unset."""
        assert update_policy(False, False) is None

    def test_first_condition_wins(self):
        """Test 'never' wins when both flags are set."""
        assert update_policy(True, True) == "never"
