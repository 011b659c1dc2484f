import json

import pytest

from mms_cli import main as cli
from mms_pdu import SendConf, encode_pdu
from mms_shared import constants as c


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    """Run each CLI call without a config.yaml or environment overrides."""
    monkeypatch.chdir(tmp_path)
    for name in ("MMS_PLATFORM_VERSION", "MMS_OPERATION_TIMEOUT_MS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_decode_prints_summary(capsys):
    conf = SendConf()
    conf.transaction_id = "T-1"
    conf.response_status = c.RESPONSE_STATUS_OK

    code = cli.main(["--action", "decode", "--hex", encode_pdu(conf).hex()])

    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out["pdu"] == "SendConf"
    assert out["message_type"] == "Send-Confirmation"
    assert out["headers"]["Transaction-ID"] == "T-1"
    assert out["headers"]["Response-Status"] == c.RESPONSE_STATUS_OK


@pytest.mark.parametrize("hex_value", ["zz", "00"])
def test_decode_rejects_bad_input(hex_value, capsys):
    code = cli.main(["--action", "decode", "--hex", hex_value])

    assert code == 1
    assert "Invalid" in capsys.readouterr().err


def test_trigger_action(capsys):
    assert cli.main(["--action", "trigger", "--message", "P2P_CONNECT#USER:dGVzdA=="]) == 0
    assert json.loads(capsys.readouterr().out) == {"valid": True, "payload": "dGVzdA=="}

    assert cli.main(["--action", "trigger", "--message", "hello"]) == 1


def test_compat_action_uses_config_file(tmp_path, capsys):
    (tmp_path / "config.yaml").write_text("compat:\n  platform_version: 24\n  operation_timeout_ms: 1000\n")

    code = cli.main(["--action", "compat"])

    report = json.loads(capsys.readouterr().out)
    assert code == 0
    assert report["sending_strategy"] == report["receiving_strategy"] == "LollipopAndAbove"
    assert report["operation_timeout_ms"] == 60_000
    assert report["feature_flags"]["requires_special_permissions"] is True


def test_compat_action_version_argument(capsys):
    assert cli.main(["--action", "compat", "--platform-version", "19"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["sending_strategy"] == "KitKat"
    assert report["needs_reflection_access"] is True
    assert report["operation_timeout_ms"] == 180_000


def test_descriptor_action(capsys):
    assert cli.main(["--action", "descriptor", "--json", "{}"]) == 1
    assert json.loads(capsys.readouterr().out)["valid"] is False

    assert cli.main(["--action", "descriptor", "--json", "not json"]) == 1


def test_no_action_prints_help(capsys):
    assert cli.main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()
