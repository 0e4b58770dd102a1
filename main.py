"""Journal server — run with ``python main.py [--log-dir DIR] [--port N]``."""

from tagjournal.server import main

if __name__ == "__main__":
    main()
