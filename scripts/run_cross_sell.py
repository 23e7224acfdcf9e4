#!/usr/bin/env python3
"""Generate cross-sell recommendations from every active project locally.

Usage:
    python scripts/run_cross_sell.py
    python scripts/run_cross_sell.py --no-dedupe

Exits 0 on success, 1 on failure.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from leadintel.db.session import SessionLocal
from leadintel.services.cross_sell.cross_sell_recommender import run_cross_sell


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    dedupe = False if "--no-dedupe" in args else None
    db = SessionLocal()
    try:
        result = run_cross_sell(db, dedupe=dedupe)
        print(
            f"status={result['status']} "
            f"projects_scanned={result['projects_scanned']} "
            f"recommendations_created={result['recommendations_created']}"
        )
        return 0 if result["status"] == "completed" else 1
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
