import io
import json

import pytest

from FD2NF.pipeline import cli


@pytest.fixture(autouse=True)
def logging_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "setup_logging_from_config", lambda: calls.append(True))
    return calls


def test_main_prints_response(capsys, logging_calls):
    exit_code = cli.main(["{a}->{b}, {b}->{c}"])

    assert exit_code == 0
    assert logging_calls == [True]
    body = json.loads(capsys.readouterr().out)
    assert body["successful"] is True
    assert body["data"]["isThirdNF"] is False


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("{a}=>{b}"))

    assert cli.main([]) == 1
    body = json.loads(capsys.readouterr().out)
    assert body["error"]["kind"] == "missing_arrow"
