from __future__ import annotations
from spawn_tiles.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
