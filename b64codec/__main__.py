import sys

from b64codec.cli import main

if __name__ == "__main__":
    sys.exit(main())
