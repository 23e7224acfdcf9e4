#!/usr/bin/env python3
"""Re-run fit scoring for all companies (or one client) locally.

Usage:
    python scripts/run_fit_scoring.py
    python scripts/run_fit_scoring.py --client-id 3

Exits 0 on success, 1 on failure.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from leadintel.db.session import SessionLocal
from leadintel.services.fit.fit_writer import rescore_companies


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Re-score company fit tiers")
    parser.add_argument("--client-id", type=int, default=None)
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        result = rescore_companies(db, client_id=args.client_id)
        counts = " ".join(f"{rank}={n}" for rank, n in result["rank_counts"].items())
        print(f"status={result['status']} companies_scored={result['companies_scored']} {counts}")
        return 0 if result["status"] == "completed" else 1
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
