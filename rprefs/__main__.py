"""Allow running the service with `python -m rprefs`."""

from __future__ import annotations

import uvicorn


def main() -> None:
    uvicorn.run("rprefs.main:app", host="0.0.0.0", port=8000, reload=True)


if __name__ == "__main__":
    main()
