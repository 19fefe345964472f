import json
import logging

from tetris_scores import HighScores


def test_missing_file_starts_at_zero(tmp_path):
    assert HighScores(tmp_path / "hs.json").best == 0


def test_submit_saves_only_new_best(tmp_path):
    path = tmp_path / "nested" / "dir" / "hs.json"
    hs = HighScores(path)
    assert hs.submit(300)
    assert json.loads(path.read_text()) == {"high_score": 300}
    assert not hs.submit(200)
    assert not hs.submit(300)
    assert json.loads(path.read_text()) == {"high_score": 300}
    assert HighScores(path).best == 300


def test_malformed_file_is_ignored(tmp_path, caplog):
    path = tmp_path / "hs.json"
    path.write_text("{not json")
    with caplog.at_level(logging.WARNING, logger="tetris_scores"):
        assert HighScores(path).best == 0
    assert "unreadable" in caplog.text


def test_bad_value_is_ignored(tmp_path, caplog):
    path = tmp_path / "hs.json"
    path.write_text(json.dumps({"high_score": "lots"}))
    with caplog.at_level(logging.WARNING, logger="tetris_scores"):
        assert HighScores(path).best == 0
    assert "malformed" in caplog.text
