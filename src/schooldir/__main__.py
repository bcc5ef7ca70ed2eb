"""Entry point for 'python -m schooldir'."""

from schooldir.cli import main

if __name__ == "__main__":
    main()
