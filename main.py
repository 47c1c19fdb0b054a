import sys

from vitae.main import main


if __name__ == "__main__":
    sys.exit(main())
