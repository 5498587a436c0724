import json
from pathlib import Path

from gravity_core import DecodeError, decode, decode_initialized

from .const import ERRORS, HEX_SUFFIX

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}


def canonical_json(obj) -> str:
    return json.dumps(obj, **CANONICAL_JSON_KW)


def read_dump(path: Path) -> bytes:
    """Read an account dump: hex text for *.hex files, raw bytes otherwise."""
    if path.suffix == HEX_SUFFIX:
        return bytes.fromhex("".join(path.read_text(encoding="utf-8").split()))
    return path.read_bytes()


def write_dump(path: Path, data: bytes, as_hex: bool = False) -> None:
    if as_hex:
        path.write_text(data.hex() + "\n", encoding="utf-8")
    else:
        path.write_bytes(data)


def _fail(errors: list) -> dict:
    return {"status": "FAIL", "error_count": len(errors), "errors": errors}


def verify_account(path: Path, require_initialized: bool = False) -> dict:
    errors = []

    if not path.exists():
        errors.append({"code": "E_LAYOUT_MISSING", "message": ERRORS["E_LAYOUT_MISSING"], "path": str(path)})
        return _fail(errors)

    try:
        data = read_dump(path)
    except OSError as e:
        errors.append({"code": "E_DUMP_READ", "message": ERRORS["E_DUMP_READ"], "path": str(path), "detail": str(e)})
        return _fail(errors)
    except ValueError as e:
        errors.append({"code": "E_DUMP_HEX", "message": ERRORS["E_DUMP_HEX"], "detail": str(e)})
        return _fail(errors)

    try:
        state = decode_initialized(data) if require_initialized else decode(data)
    except DecodeError as e:
        entry = {"code": e.code, "message": ERRORS[e.code], "detail": str(e)}
        if hasattr(e, "actual"):
            entry["expected"] = e.expected
            entry["actual"] = e.actual
        if hasattr(e, "flag"):
            entry["flag"] = e.flag
        errors.append(entry)
        return _fail(errors)

    return {"status": "PASS", "error_count": 0, "errors": [], "state": state.to_dict()}
