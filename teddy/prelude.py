from __future__ import annotations
from pathlib import Path
from typing import Protocol

from teddy.config import get_prelude_root


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


PRELUDE_FILE = 'std.teddy'


def prelude_path() -> Path:
    return get_prelude_root() / PRELUDE_FILE


def load_prelude(itp: _HasEvalPrelude) -> None:
    p = prelude_path()
    if not p.is_file():
        raise FileNotFoundError(f"Cannot find prelude '{PRELUDE_FILE}' in TEDDY_PRELUDE_PATH")
    itp.eval_prelude(p.read_text(encoding='utf-8'))
