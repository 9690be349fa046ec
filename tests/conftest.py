import os
import sys

import pytest


def pytest_configure():
    # Ensure `src/` is importable as top-level for `common.*`, `state.*`, `logs.*`, `params.*`
    root = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    src_path = os.path.join(root, "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


@pytest.fixture
def client_error():
    """Build a real botocore ClientError with the given code."""
    from botocore.exceptions import ClientError

    def make(code: str, operation: str = "Operation", message: str = "boom") -> ClientError:
        return ClientError({"Error": {"Code": code, "Message": message}}, operation)

    return make
