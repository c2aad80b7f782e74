"""
Validate a JSON file of listing drafts.

Usage:
    python scripts/validate_drafts.py drafts.json
    python scripts/validate_drafts.py drafts.json --payload

Exits with status 1 when any draft has validation errors.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import structlog
from pydantic import ValidationError as PydanticValidationError

from config import configure_logging
from exceptions import SubmissionBlockedError
from models import ListingDraft
from services import prepare_submission, validate_all

logger = structlog.get_logger(__name__)


def load_drafts(path: Path) -> list[ListingDraft]:
    """Read a draft array (or a single draft object) from a JSON file."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("listings", [data])
    return [ListingDraft.model_validate(item) for item in data]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate listing drafts")
    parser.add_argument("file", type=Path, help="JSON file with a draft array")
    parser.add_argument(
        "--payload",
        action="store_true",
        help="Print the submission payload when all drafts are valid",
    )
    args = parser.parse_args(argv)

    configure_logging()

    try:
        drafts = load_drafts(args.file)
    except (OSError, json.JSONDecodeError, PydanticValidationError) as e:
        logger.error("drafts_load_failed", file=str(args.file), error=str(e))
        print(f"Could not read drafts from {args.file}: {e}")
        return 2

    report = validate_all(drafts)
    print(f"Checked {len(drafts)} draft(s)\n")

    if report.is_valid:
        print("All drafts are ready to submit.")
        if args.payload:
            try:
                print(json.dumps(prepare_submission(drafts), indent=2))
            except SubmissionBlockedError as e:
                print(e.message)
                return 1
        return 0

    for index in range(len(drafts)):
        errors = report.errors_for(index)
        if not errors:
            continue
        print(f"Draft {index + 1} ({drafts[index].title or 'untitled'}):")
        for path, message in errors.items():
            print(f"  - {path}: {message}")

    print(f"\n{len(report.errors)} error(s) found.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
