"""JSON text frame decoding shared by both relay directions."""

from __future__ import annotations

from typing import Any

import orjson


def decode_json_frame(raw: str | bytes) -> Any:
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc


def encode_json_frame(event: Any) -> str:
    return orjson.dumps(event).decode("utf-8")


__all__ = ["decode_json_frame", "encode_json_frame"]
