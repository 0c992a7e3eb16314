import sys

from file_manager.cli_repl import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
