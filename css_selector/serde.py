"""JSON helpers that move dataclass records in and out of JSON text.

:func:`from_json` builds the target record explicitly from the decoded
mapping instead of patching the type onto a parsed object, so the result is
an ordinary instance with its methods and ``__post_init__`` validation.
"""

from __future__ import annotations

from dataclasses import asdict, fields, is_dataclass
import json
import typing as _t

__all__ = ["get_json", "from_json"]

T = _t.TypeVar("T")

_COMPACT_SEPARATORS = (",", ":")


def get_json(obj: _t.Any) -> str:
    """Serialize ``obj`` to compact JSON text.

    Dataclass instances are converted with :func:`dataclasses.asdict` at any
    depth, including inside lists and dicts.
    """
    return json.dumps(obj, separators=_COMPACT_SEPARATORS, default=_encode_record)


def _encode_record(obj: _t.Any) -> _t.Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def from_json(cls: type[T], text: str | bytes) -> T:
    """Decode ``text`` and construct a ``cls`` record from it.

    Only keys naming an init field of ``cls`` are copied; unknown keys are
    ignored. Missing required fields surface as the constructor's
    :class:`TypeError`, malformed JSON as :class:`json.JSONDecodeError`.
    """
    if not (is_dataclass(cls) and isinstance(cls, type)):
        raise TypeError(f"from_json target must be a dataclass type, not {cls!r}")

    payload = json.loads(text)
    if not isinstance(payload, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(payload).__name__}"
        )

    names = {f.name for f in fields(cls) if f.init}
    return cls(**{key: value for key, value in payload.items() if key in names})
