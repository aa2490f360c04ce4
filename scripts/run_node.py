#!/usr/bin/env python3
"""CLI script to run a single SeggWat node operation."""

import json
import sys
from pathlib import Path

# Load environment variables (SEGGWAT_API_KEY, SEGGWAT_API_URL)
from dotenv import load_dotenv
project_root = Path(__file__).parent.parent
load_dotenv(project_root / ".env")

from seggwat.errors import SeggwatError
from seggwat_node.runner import run_node


def main():
    """Main CLI function."""
    if len(sys.argv) < 3:
        print("Usage: python run_node.py <resource> <operation> ['<parameters json>'] [--continue-on-fail]")
        print("Example: python run_node.py feedback list '{\"projectId\": \"p1\", \"limit\": 5}'")
        sys.exit(1)

    resource, operation = sys.argv[1], sys.argv[2]
    extra = [arg for arg in sys.argv[3:] if arg != "--continue-on-fail"]
    continue_on_fail = "--continue-on-fail" in sys.argv[3:]

    try:
        parameters = json.loads(extra[0]) if extra else {}
    except json.JSONDecodeError as e:
        print(f"Invalid parameters JSON: {e}", file=sys.stderr)
        sys.exit(1)

    parameters.update({"resource": resource, "operation": operation})

    try:
        output = run_node(parameters, continue_on_fail=continue_on_fail)
        print(json.dumps([item["json"] for item in output], indent=2))
    except SeggwatError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
