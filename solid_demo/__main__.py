"""Allow running the demo with ``python -m solid_demo``."""
import sys

from solid_demo.driver import main

if __name__ == "__main__":
    sys.exit(main())
