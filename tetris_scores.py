"""High score persistence (JSON under ~/.tetris)"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

log = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".tetris" / "highscore.json"


class HighScores:
    """Best score across sessions. I/O problems are logged, never raised."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else DEFAULT_PATH
        self.best = self.load()

    def load(self) -> int:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as e:
            log.warning("ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        best = data.get("high_score", 0) if isinstance(data, dict) else 0
        if isinstance(best, bool) or not isinstance(best, int) or best < 0:
            log.warning("ignoring malformed high score in %s: %r", self.path, best)
            return 0
        return best

    def submit(self, score: int) -> bool:
        """Record score; returns True (and saves) when it beats the best."""
        if score <= self.best:
            return False
        self.best = score
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"high_score": score}), encoding="utf-8")
        except OSError as e:
            log.warning("could not save high score to %s: %s", self.path, e)
        else:
            log.info("new high score %d saved to %s", score, self.path)
        return True
