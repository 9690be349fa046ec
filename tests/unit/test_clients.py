from __future__ import annotations

from common import clients
from common.config import ApiSettings, AwsSettings, SupabaseSettings


def test_http_client_uses_base_url_and_timeout():
    c = clients.http_client(ApiSettings(base_url="https://api.example.com/v1/", timeout=4.0))
    try:
        assert str(c.base_url) == "https://api.example.com/v1/"
        assert c.timeout.read == 4.0
    finally:
        c.close()


def test_aws_session_with_static_keys():
    s = clients.aws_session(
        AwsSettings(region="eu-central-1", access_key_id="AKIAEXAMPLE", secret_access_key="shh")
    )
    assert s.region_name == "eu-central-1"
    creds = s.get_credentials()
    assert creds.access_key == "AKIAEXAMPLE"
    assert creds.secret_key == "shh"


def test_sdk_clients_built_from_session():
    s = clients.aws_session(AwsSettings(region="us-east-1", access_key_id="A", secret_access_key="B"))
    assert clients.s3_client(s).meta.service_model.service_name == "s3"
    assert clients.ssm_client(s).meta.service_model.service_name == "ssm"
    assert clients.dynamodb_table(s, "tbl").name == "tbl"


def test_supabase_client_passes_url_and_key(monkeypatch):
    seen = {}

    def fake_create_client(url, key):
        seen["args"] = (url, key)
        return "client"

    monkeypatch.setattr(clients, "create_client", fake_create_client)
    out = clients.supabase_client(SupabaseSettings(url="https://x.supabase.co", anon_key="anon"))
    assert out == "client"
    assert seen["args"] == ("https://x.supabase.co", "anon")
