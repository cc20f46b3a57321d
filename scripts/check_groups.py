#!/usr/bin/env python3
"""
Group catalog check script.
Parses and validates group JSON files, prints them in specificity order and
optionally selects the group that applies to a set of attributes.
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional

from shared.config import get_config
from shared.errors import GroupEngineException
from shared.logging import configure_logging, end_run, start_run
from service_groups.app.groups import GroupCatalog, parse_group


def parse_attributes(pairs: List[str]) -> Dict[str, str]:
    """Turn ``key=value`` arguments into an attribute map."""
    attributes = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got: {pair}")
        attributes[key] = value
    return attributes


def check_catalog(files: List[Path], attributes: Optional[Dict[str, str]]) -> int:
    """Load group files into a catalog, report its order and optionally select."""
    catalog = GroupCatalog()
    total_errors = 0

    for path in files:
        try:
            group = parse_group(path.read_bytes())
            catalog.add_group(group)
        except OSError as e:
            print(f"❌ {path}: {e}")
            total_errors += 1
            continue
        except GroupEngineException as e:
            print(f"❌ {path}: {e.to_response().model_dump_json()}")
            total_errors += 1
            continue
        print(f"✅ {path}: group '{group.id}' -> profile '{group.profile}'")

    print("\nSpecificity order (most general first):")
    for group in catalog.list_groups():
        print(f"   - {group.id}: [{group.requirement_string()}]")

    if attributes is not None:
        selected = catalog.select(attributes)
        if selected is None:
            print("\nNo applicable group")
            total_errors += 1
        else:
            print(f"\nSelected group '{selected.id}' -> profile '{selected.profile}'")

    return 0 if total_errors == 0 else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Validate group files and report the catalog order."""
    parser = argparse.ArgumentParser(description="Check group definitions")
    parser.add_argument("files", nargs="+", type=Path, help="Group JSON files")
    parser.add_argument("--select", nargs="*", default=None, metavar="KEY=VALUE",
                        help="Attributes of a machine to select a group for")
    parser.add_argument("--log-level", default=None, help="Override GROUPS_LOG_LEVEL")
    parser.add_argument("--run-id", default=None, help="Correlation ID attached to log events")
    args = parser.parse_args(argv)

    config = get_config()
    configure_logging(config.service_name, args.log_level or config.log_level)

    try:
        attributes = parse_attributes(args.select) if args.select is not None else None
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    run_id = start_run(args.run_id)
    print(f"Checking {len(args.files)} group file(s), run {run_id}")
    try:
        return check_catalog(args.files, attributes)
    finally:
        end_run()


if __name__ == "__main__":
    sys.exit(main())
