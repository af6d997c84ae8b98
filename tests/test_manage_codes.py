"""manage-codes CLI — commands against a temporary codes file."""

import json

import pytest

from portfolio_api.manage_codes import main


@pytest.fixture
def store(tmp_path):
    return tmp_path / "career-codes.json"


def _run(store, *args):
    return main(["--file", str(store), *args])


def _seed(store, entries):
    store.write_text(json.dumps(entries), encoding="utf-8")


def test_no_command_prints_usage(capsys):
    assert main([]) == 0
    assert "Access Code Manager" in capsys.readouterr().out


def test_add_prints_code_and_link(store, capsys):
    assert _run(store, "add", "Jane Smith", "7d") == 0
    out = capsys.readouterr().out

    saved = json.loads(store.read_text(encoding="utf-8"))
    code = saved[0]["code"]
    assert f"Code:     {code}" in out
    assert "For:      Jane Smith" in out
    assert f"https://example.test/career-highlights.html?code={code}" in out


def test_add_with_bad_duration_fails(store, capsys):
    assert _run(store, "add", "Jane", "7w") == 1
    assert "Invalid duration format" in capsys.readouterr().err
    assert not store.exists()


def test_add_without_duration_is_usage_error(store):
    with pytest.raises(SystemExit) as exc:
        _run(store, "add", "Jane")
    assert exc.value.code == 2


def test_list_empty(store, capsys):
    assert _run(store, "list") == 0
    assert "No codes found." in capsys.readouterr().out


def test_list_shows_status(store, capsys):
    _seed(store, [
        {"code": "OLD111", "name": "Old", "expires": "2000-01-01T00:00:00Z"},
        {"code": "NEW333", "name": "New", "expires": "2099-01-01T00:00:00Z"},
    ])
    assert _run(store, "list") == 0
    lines = capsys.readouterr().out.splitlines()
    old = next(l for l in lines if "OLD111" in l)
    new = next(l for l in lines if "NEW333" in l)
    assert old.endswith("EXPIRED")
    assert "valid until 2099-01-01" in new


def test_revoke(store, capsys):
    _seed(store, [{"code": "ABC123", "name": "Jane", "expires": "2099-01-01T00:00:00Z"}])
    assert _run(store, "revoke", "abc123") == 0
    assert 'Code "ABC123" revoked.' in capsys.readouterr().out
    assert json.loads(store.read_text(encoding="utf-8")) == []


def test_revoke_unknown(store, capsys):
    _seed(store, [{"code": "ABC123", "name": "Jane", "expires": "2099-01-01T00:00:00Z"}])
    assert _run(store, "revoke", "nope99") == 1
    assert 'Code "NOPE99" not found.' in capsys.readouterr().err


def test_cleanup(store, capsys):
    _seed(store, [
        {"code": "OLD111", "name": "Old", "expires": "2000-01-01T00:00:00Z"},
        {"code": "NEW333", "name": "New", "expires": "2099-01-01T00:00:00Z"},
    ])
    assert _run(store, "cleanup") == 0
    assert "Removed 1 expired codes. 1 active." in capsys.readouterr().out


def test_export_prints_career_codes_value(store, capsys):
    _seed(store, [{
        "code": "ABC123", "name": "Jane",
        "expires": "2099-01-01T00:00:00Z", "created": "2026-01-01T00:00:00.000Z",
    }])
    assert _run(store, "export") == 0
    out = capsys.readouterr().out
    value = '[{"code":"ABC123","name":"Jane","expires":"2099-01-01T00:00:00Z"}]'
    assert value in out.splitlines()
    assert f"CAREER_CODES='{value}'" in out


def test_corrupt_store_is_reported(store, capsys):
    store.write_text("{broken", encoding="utf-8")
    assert _run(store, "list") == 1
    assert "not a valid codes file" in capsys.readouterr().err


def test_export_env_line_survives_quotes_in_names(store, capsys):
    import shlex

    _seed(store, [{"code": "ABC123", "name": "Pat O'Brien", "expires": "2099-01-01T00:00:00Z"}])
    assert _run(store, "export") == 0
    line = next(l for l in capsys.readouterr().out.splitlines() if l.strip().startswith("CAREER_CODES="))
    (assignment,) = shlex.split(line)
    value = assignment.split("=", 1)[1]
    assert json.loads(value)[0]["name"] == "Pat O'Brien"
