"""Tests for password hashing and policy helpers."""

import pytest
from app.core.passwords import check_password_policy, hash_password, verify_password


def test_hash_is_salted_and_verifiable():
    first = hash_password("Secr3t")
    second = hash_password("Secr3t")

    assert first != "Secr3t"
    assert first != second
    assert verify_password(first, "Secr3t")
    assert not verify_password(first, "secr3t")


@pytest.mark.parametrize("stored", [None, ""])
def test_missing_hash_never_verifies(stored):
    assert verify_password(stored, "anything") is False


@pytest.mark.parametrize("raw", ["", None])
def test_hash_rejects_empty_input(raw):
    with pytest.raises(ValueError):
        hash_password(raw)


def test_policy_accepts_compliant_password():
    assert check_password_policy("Passw0rd") == []


@pytest.mark.parametrize(
    "raw, fragment",
    [
        ("Ab1", "at least 6"),
        ("Password", "digit"),
        ("PASSW0RD", "lowercase"),
        ("passw0rd", "uppercase"),
    ],
)
def test_policy_reports_each_violation(raw, fragment):
    problems = check_password_policy(raw)
    assert any(fragment in p for p in problems)
