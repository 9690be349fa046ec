from __future__ import annotations

import pytest

from common.errors import OperationFailedError
from params.ssm_store import SsmParameterStore


class _FakeSSM:
    def __init__(self, client_error) -> None:
        self._params = {}
        self._client_error = client_error
        self.calls = []
        self.fail_with = None

    def get_parameter(self, *, Name: str, WithDecryption: bool):
        self.calls.append(("get", Name, WithDecryption))
        if self.fail_with:
            raise self.fail_with
        if Name not in self._params:
            raise self._client_error("ParameterNotFound", "GetParameter")
        return {"Parameter": {"Name": Name, "Type": "SecureString", "Value": self._params[Name]}}

    def put_parameter(self, *, Name: str, Value: str, Type: str, Overwrite: bool):
        self.calls.append(("put", Name, Type, Overwrite))
        if self.fail_with:
            raise self.fail_with
        if Value == "":
            raise self._client_error("ValidationException", "PutParameter")
        self._params[Name] = Value
        return {"Version": 1}

    def delete_parameter(self, *, Name: str):
        self.calls.append(("delete", Name))
        if self.fail_with:
            raise self.fail_with
        if Name not in self._params:
            raise self._client_error("ParameterNotFound", "DeleteParameter")
        del self._params[Name]
        return {}


@pytest.fixture
def ssm(client_error):
    return _FakeSSM(client_error)


def test_unset_parameter_reads_empty(ssm):
    store = SsmParameterStore(ssm=ssm, name="/app/setting")
    assert store.get_parameter() == ""


def test_put_then_get_roundtrip_with_decryption(ssm):
    store = SsmParameterStore(ssm=ssm, name="/app/setting")
    store.put_parameter("hunter2")

    assert store.get_parameter() == "hunter2"
    assert ("put", "/app/setting", "SecureString", True) in ssm.calls
    assert ("get", "/app/setting", True) in ssm.calls


def test_put_overwrites(ssm):
    store = SsmParameterStore(ssm=ssm, name="/app/setting")
    store.put_parameter("one")
    store.put_parameter("two")
    assert store.get_parameter() == "two"


def test_empty_string_roundtrip_deletes_parameter(ssm):
    store = SsmParameterStore(ssm=ssm, name="/app/setting")
    store.put_parameter("something")
    store.put_parameter("")

    assert store.get_parameter() == ""
    assert ("delete", "/app/setting") in ssm.calls
    # deleting an already-absent parameter is fine
    store.put_parameter("")


def test_failures_map_to_operation_failed(ssm, client_error):
    store = SsmParameterStore(ssm=ssm, name="/app/setting")
    ssm.fail_with = client_error("AccessDeniedException", "GetParameter", "not allowed")

    with pytest.raises(OperationFailedError) as ei:
        store.get_parameter()
    assert str(ei.value).startswith("Failed to fetch parameter: ")
    assert "not allowed" in str(ei.value)

    with pytest.raises(OperationFailedError, match="Failed to save parameter"):
        store.put_parameter("v")
    with pytest.raises(OperationFailedError, match="Failed to save parameter"):
        store.put_parameter("")


def test_name_required(ssm):
    with pytest.raises(ValueError):
        SsmParameterStore(ssm=ssm, name="")
