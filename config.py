"""
config.py
Default configuration and loader. Very small helper to override defaults via JSON files.
"""

import json
from pathlib import Path
from typing import Any, Dict

# Default settings for the recovery runner.
DEFAULT_CONFIG: Dict[str, Any] = {
    "transform": "recursive",          # "recursive" or "iterative"
    "cache_table": True,               # reuse the evaluation point table across calls
    "output_filename": "coefficients.json",
    "output_encoding": "hex",          # "hex" (0x-prefixed, 32 bytes) or "int"
    "log_level": "INFO",
    "preview_count": 8,                # coefficients shown in the printed summary
}


def load_config(path: str, base: Dict[str, Any] = None) -> Dict[str, Any]:
    """
    Load a JSON config file and merge it into base (shallow merge).

    :param path: path to JSON config file
    :param base: base configuration dictionary to update (if None use DEFAULT_CONFIG)
    :return: merged configuration dictionary
    """
    base = base.copy() if base is not None else DEFAULT_CONFIG.copy()
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    for k, v in data.items():
        base[k] = v
    return base
