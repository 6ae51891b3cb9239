"""vibe_cherry.host.main

Local generation host daemon.

Goal: give the desktop UI a stable localhost API in front of the model runtime.

Run:
  python -m vibe_cherry
  # or: vibe-cherry-host
"""

from __future__ import annotations

import os

import uvicorn

from vibe_cherry.host.api import create_app


def main() -> None:
    host = os.environ.get("VIBE_CHERRY_HOST", "127.0.0.1")
    port = int(os.environ.get("VIBE_CHERRY_PORT", "17123"))

    app = create_app()
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    main()
