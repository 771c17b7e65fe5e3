from __future__ import annotations

import sys
from pathlib import Path


def main() -> int:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    from origin_gateway.cli import main as probe_main

    return probe_main()


if __name__ == "__main__":
    raise SystemExit(main())
