import sys

from battleship_abilities.domain.printer import print_board
from battleship_abilities.scenarios import default_scenario, run_scenario
from battleship_abilities.utils import debug


def main():
    # Enable debug via flag or env var (BATTLESHIP_DEBUG=1)
    debug.configure_from(sys.argv)

    board = run_scenario(default_scenario())
    print_board(board)
    return 0


if __name__ == "__main__":
    sys.exit(main())
