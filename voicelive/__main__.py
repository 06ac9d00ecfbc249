"""Run the relay under uvicorn: `python -m voicelive` or `voicelive-relay`."""

from __future__ import annotations

import uvicorn

from voicelive.runtime.settings import load_server_settings


def main() -> None:
    settings = load_server_settings()
    uvicorn.run("voicelive.server:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
