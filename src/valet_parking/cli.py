"""Command file entry point."""

import logging
import sys

import yaml

from .commands import process_file
from .config import load_default_config
from .errors import CommandParseError


def main():
    """CLI entry point: run a command file and print one line per outcome."""
    if len(sys.argv) < 2 or not sys.argv[1].strip():
        print("Error with input file. Pass a valid filename as input parameter")
        print("\nUsage: valet-parking <input_file>")
        sys.exit(1)

    try:
        config = load_default_config()
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    # Logs go to stderr so stdout only carries command output
    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        for line in process_file(sys.argv[1], config.pricing.to_schedule()):
            print(line)
    except CommandParseError as e:
        print(e)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Exiting with error. {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
