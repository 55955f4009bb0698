"""Allow ``python -m modetokens``."""

from modetokens.cli import main

if __name__ == "__main__":
    main()
