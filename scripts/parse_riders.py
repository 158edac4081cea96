"""Fetch the configured riders' schedules and write schedule.json + docs/schedule.json.

Standalone wrapper around the rider_schedule CLI for use without installing
the package (e.g. from a scheduled GitHub Action).

Run with: python scripts/parse_riders.py
Riders:   python scripts/parse_riders.py "Jane Doe" "John Smith"
Table:    python scripts/parse_riders.py --table

Exit codes:
  0 = success (JSON on stdout, files written)
  1 = error (message on stderr)
"""

import os
import sys

from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.rider_schedule.cli import main  # noqa: E402

if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
