"""Main entry point for direct module execution."""

import sys
import logging

from .cli import cli
from .exceptions import GitUserError
from .ui_common import print_error

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    try:
        logger.debug("Starting git-user")
        cli(prog_name="git-user")
    except GitUserError as e:
        print_error(str(e), e.details)
        sys.exit(1)
    except Exception as e:
        logger.error("Fatal error", exc_info=True)
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
