from __future__ import annotations

import base64

import pytest

from hiki_attendance.console.gate import ConsoleAuthGate, decode_basic_credentials
from hiki_attendance.console.model import ConsoleCredentials
from hiki_attendance.core.enums import GateOutcome
from hiki_attendance.core.exceptions import CredentialDecodeError

from conftest import basic_header


@pytest.fixture
def gate():
    return ConsoleAuthGate(ConsoleCredentials(username="admin", password="admin123"))


@pytest.mark.parametrize("header", [None, ""])
def test_missing_header_is_challenged(gate, header):
    decision = gate.evaluate(header)
    assert decision.outcome is GateOutcome.CHALLENGE
    assert decision.message == "Authorization header is required"


@pytest.mark.parametrize("header", ["Bearer xyz", "basic YWRtaW46YWRtaW4xMjM=", "Basic", "Digest username=admin"])
def test_non_basic_scheme_is_challenged(gate, header):
    decision = gate.evaluate(header)
    assert decision.outcome is GateOutcome.CHALLENGE
    assert decision.message == "Basic authentication is required"


def test_default_credentials_are_admitted(gate):
    decision = gate.evaluate(basic_header("admin", "admin123"))
    assert decision.admitted
    assert decision.message is None


def test_wrong_password_is_invalid(gate):
    decision = gate.evaluate(basic_header("admin", "wrongpass"))
    assert decision.outcome is GateOutcome.CHALLENGE
    assert decision.message == "Invalid credentials"


@pytest.mark.parametrize("username,password", [("Admin", "admin123"), ("admin", "ADMIN123"), ("admin ", "admin123")])
def test_comparison_is_exact(gate, username, password):
    assert gate.evaluate(basic_header(username, password)).message == "Invalid credentials"


def test_invalid_base64_is_a_fault(gate):
    decision = gate.evaluate("Basic %%%notbase64%%%")
    assert decision.outcome is GateOutcome.FAULT
    assert decision.message == "Authentication error"


def test_invalid_utf8_is_a_fault(gate):
    token = base64.b64encode(b"\xff\xfe:admin123").decode("ascii")
    assert gate.evaluate(f"Basic {token}").outcome is GateOutcome.FAULT


def test_payload_without_colon_is_invalid(gate):
    token = base64.b64encode(b"admin").decode("ascii")
    decision = gate.evaluate(f"Basic {token}")
    assert decision.outcome is GateOutcome.CHALLENGE
    assert decision.message == "Invalid credentials"


def test_empty_token_is_invalid_not_fault(gate):
    assert gate.evaluate("Basic ").message == "Invalid credentials"


def test_password_may_contain_colons():
    gate = ConsoleAuthGate(ConsoleCredentials(username="ops", password="p:a:ss"))
    assert gate.evaluate(basic_header("ops", "p:a:ss")).admitted
    assert not gate.evaluate(basic_header("ops", "p")).admitted


def test_non_ascii_credentials_compare_correctly():
    gate = ConsoleAuthGate(ConsoleCredentials(username="quản-lý", password="mật-khẩu"))
    assert gate.evaluate(basic_header("quản-lý", "mật-khẩu")).admitted
    assert not gate.evaluate(basic_header("quản-lý", "mat-khau")).admitted


def test_repeated_admits_do_not_accumulate_state(gate):
    header = basic_header("admin", "admin123")
    for _ in range(20):
        gate.evaluate(basic_header("admin", "nope"))
        assert gate.evaluate(header).admitted


def test_challenge_header_names_realm(gate):
    assert gate.challenge_header == 'Basic realm="Hiki Vision Console"'


def test_decode_splits_on_first_colon():
    token = base64.b64encode(b"user:pa:ss").decode("ascii")
    assert decode_basic_credentials(token) == ("user", "pa:ss")


def test_decode_rejects_garbage():
    with pytest.raises(CredentialDecodeError):
        decode_basic_credentials("%%%notbase64%%%")


def test_credentials_repr_hides_password():
    assert "admin123" not in repr(ConsoleCredentials(username="admin", password="admin123"))
