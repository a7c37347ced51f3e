import io

import pytest
import requests

from conftest import DummyResponse, DummySession
from wordsapi import cli
from wordsapi.cli import SimpleTemplate


@pytest.fixture()
def session(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("WORDSAPI_KEY", "TEST_TOKEN")
    fake = DummySession(
        DummyResponse(
            '{"word":"silence","antonyms":["sound"]}',
            headers={"x-ratelimit-requests-remaining": "41", "x-ratelimit-requests-limit": "100"},
        )
    )
    monkeypatch.setattr(requests, "Session", lambda: fake)
    return fake


def test_render_word_record():
    item = {
        "word": "example",
        "frequency": 4.83,
        "entries": [
            {"definition": "a typical instance", "part_of_speech": "noun", "synonyms": ["case", "instance"]}
        ],
    }
    lines = SimpleTemplate(item).render().splitlines()
    assert lines[0] == "example"
    assert "frequency: 4.83" in lines
    assert "definition: a typical instance" in lines
    assert "part of speech: noun" in lines
    assert "synonyms: case, instance" in lines


def test_render_skips_relation_key_and_empty_values():
    text = SimpleTemplate({"word": "tree", "relation_key": "hasTypes", "words": ["oak"], "x": None}).render()
    assert text == "tree\nwords: oak"


def test_main_looks_up_words(session, capsys):
    assert cli.main(["--relation", "antonyms", "silence"]) == 0
    out = capsys.readouterr().out
    assert "antonyms: sound" in out
    assert "41 of 100" in out
    assert session.calls[0]["url"].endswith("/silence/antonyms")
    assert session.closed


def test_main_raw(session, capsys):
    assert cli.main(["--raw", "-r", "ANTONYMS", "silence"]) == 0
    assert '{"word":"silence","antonyms":["sound"]}' in capsys.readouterr().out


def test_main_reports_request_errors(session, capsys):
    session.error = requests.ConnectionError("boom")
    assert cli.main(["silence"]) == 1
    assert "silence" in capsys.readouterr().err


def test_main_reports_parse_errors(session, capsys):
    session.response = DummyResponse("{not json")
    assert cli.main(["silence"]) == 1
    assert "{not json" in capsys.readouterr().err


def test_main_unknown_relation(session, capsys):
    assert cli.main(["--relation", "homophones", "silence"]) == 2
    assert "unknown relation" in capsys.readouterr().err


def test_main_without_key(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert cli.main(["silence"]) == 2
    assert "WORDSAPI_KEY" in capsys.readouterr().err


def test_main_interactive(session, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("silence\n\n"))
    assert cli.main(["-r", "antonyms"]) == 0
    out = capsys.readouterr().out
    assert "antonyms: sound" in out
    assert "quit the program" in out
    assert len(session.calls) == 1


def test_main_reports_empty_word(session, capsys):
    assert cli.main(["", "silence"]) == 1
    assert "word must not be empty" in capsys.readouterr().err
    assert len(session.calls) == 1
