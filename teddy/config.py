from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (teddy package directory)
_TEDDY_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _TEDDY_DIR / 'prelude'
_DEFAULT_FLOAT_PRECISION = 6


def get_prelude_root() -> Path:
    """Directory holding std.teddy: TEDDY_PRELUDE_PATH or the packaged one.

    A path naming a file resolves to the directory containing it.
    """
    raw = os.environ.get('TEDDY_PRELUDE_PATH', '').strip()
    if not raw:
        return _DEFAULT_PRELUDE_DIR
    p = Path(raw)
    return p if p.is_dir() else p.parent


def get_float_precision() -> int:
    raw = os.environ.get('TEDDY_FLOAT_PRECISION', '').strip()
    if not raw:
        return _DEFAULT_FLOAT_PRECISION
    try:
        digits = int(raw)
    except ValueError:
        return _DEFAULT_FLOAT_PRECISION
    return digits if digits >= 0 else _DEFAULT_FLOAT_PRECISION
