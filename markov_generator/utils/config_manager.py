# config_manager.py - JSON config manager

import json
import os
from typing import Any, Dict, Optional

from markov_generator.context.tokenizer import DEFAULT_DELIMITERS
from markov_generator.utils.logger_utils import DEFAULT_LOG_PATH

DEFAULTS: Dict[str, Any] = {
    "depth": 4,              # longest context the chain records
    "delimiters": DEFAULT_DELIMITERS,
    "max_words": 0,          # 0 = no cap on generated sentence length
    "seed": None,            # None = seed from system entropy
    "log_path": DEFAULT_LOG_PATH,
}


def _coerce(key: str, val: Any, kind: type) -> Any:
    """Accept `val` only if it already is `kind` or is a string that parses to it."""
    # bool is an int subclass, json `true` must not pass as a depth
    if isinstance(val, kind) and not (isinstance(val, bool) and kind is not bool):
        return val
    if isinstance(val, str):
        try:
            return kind(val)
        except ValueError:
            raise ValueError(f"{key}: cannot read {val!r} as {kind.__name__}") from None
    raise ValueError(f"{key}: expected {kind.__name__}, got {type(val).__name__} {val!r}")


class Config:
    """Tool settings, optionally backed by a JSON file."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data = dict(DEFAULTS)
        if path is not None:
            self._load()

    def _load(self):
        if os.path.exists(self.path):
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError(f"{self.path}: config must be a JSON object")
            for k, v in loaded.items():
                self.set(k, v, persist=False)
        else:
            self.save()

    def save(self):
        if self.path is None:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str) -> Any:
        return self.data[key]

    def set(self, key: str, val: Any, persist: bool = True):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        default = DEFAULTS[key]
        if default is None:
            # seed: None, an int, or a string holding one
            if val is None or val in ("", "none", "None"):
                self.data[key] = None
            else:
                self.data[key] = _coerce(key, val, int)
        else:
            self.data[key] = _coerce(key, val, type(default))
        if persist:
            self.save()

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.data)
