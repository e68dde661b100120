"""Allow `python -m railroad_dsl`."""

from railroad_dsl.cli import main

if __name__ == "__main__":
    main()
