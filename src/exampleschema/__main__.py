"""Allow ``python -m exampleschema``."""

from exampleschema.cli import main

if __name__ == "__main__":
    main()
