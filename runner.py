"""
runner.py
High-level recovery runner. Loads an evaluation vector from JSON, recovers the
coefficients with blob.recover and exports them as a JSON document.

Input file: either a JSON list of field elements or an object with an
"evaluations" list. Elements may be ints, decimal strings or 0x-prefixed hex.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from blob import recover
from config import DEFAULT_CONFIG
from utils import read_json, stable_fingerprint, write_json_atomic


logger = logging.getLogger(__name__)

FIELD_ELEMENT_BYTES = 32


def _parse_element(raw: Any, index: int) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"evaluation {index}: booleans are not field elements")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        s = raw.strip().lower()
        try:
            if s.startswith("0x"):
                return int(s, 16)
            return int(s, 10)
        except ValueError:
            raise ValueError(f"evaluation {index}: cannot parse {raw!r}") from None
    raise ValueError(f"evaluation {index}: unsupported type {type(raw).__name__}")


def load_evaluations(path: str) -> List[int]:
    """
    Read an evaluation vector from a JSON file.
    """
    data = read_json(path)
    if data is None:
        raise FileNotFoundError(f"Input file not found: {path}")
    if isinstance(data, dict):
        data = data.get("evaluations")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list or an object with an 'evaluations' list")
    return [_parse_element(v, i) for i, v in enumerate(data)]


def encode_elements(values: Sequence[int], encoding: str = "hex") -> List[Any]:
    """
    Render field elements for JSON output: "hex" gives 0x-prefixed 32-byte big-endian strings.
    """
    if encoding == "hex":
        return ["0x" + v.to_bytes(FIELD_ELEMENT_BYTES, "big").hex() for v in values]
    if encoding == "int":
        return [int(v) for v in values]
    raise ValueError(f"unknown output encoding '{encoding}'")


def run_recovery(input_path: str, out_dir: str = "out", config: Dict[str, Any] = None, quiet: bool = False) -> List[int]:
    """
    Run the load + recover + export pipeline.

    :param input_path: path to the JSON evaluation vector
    :param out_dir: directory to write outputs
    :param config: configuration dictionary
    :param quiet: if True, suppress the printed summary
    :return: recovered coefficients
    """
    cfg = DEFAULT_CONFIG.copy()
    if config:
        cfg.update(config)

    input_path = Path(input_path)
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    logger.info("loading evaluations from %s", input_path)
    evaluations = load_evaluations(str(input_path))

    transform = cfg.get("transform", "recursive")
    coeffs = recover(evaluations, transform=transform, cache_table=cfg.get("cache_table", True))

    encoded = encode_elements(coeffs, cfg.get("output_encoding", "hex"))
    doc = {
        "length": len(coeffs),
        "transform": transform,
        "fingerprint": stable_fingerprint(encode_elements(coeffs, "hex")),
        "coefficients": encoded,
    }
    out_path = out_dir / cfg.get("output_filename", "coefficients.json")
    write_json_atomic(str(out_path), doc)
    logger.info("wrote %d coefficients to %s", len(coeffs), out_path)

    if not quiet:
        print_summary(doc, coeffs, cfg)
    return coeffs


def print_summary(doc: Dict[str, Any], coeffs: Sequence[int], cfg: Dict[str, Any]) -> None:
    """
    Print a compact summary of the recovered coefficient vector.
    """
    top_n = cfg.get("preview_count", 8)
    nonzero = sum(1 for c in coeffs if c)

    print("=== Blob Recovery Summary ===")
    print(f"Coefficients: {doc.get('length', len(coeffs))}")
    print(f"Non-zero: {nonzero}")
    print(f"Transform: {doc.get('transform')}")
    print(f"Fingerprint: {doc.get('fingerprint')}")
    print()
    print("First coefficients (up to {}):".format(top_n))
    for i, c in enumerate(doc["coefficients"][:top_n]):
        print(f"  [{i}] {c}")
    print("=============================")
