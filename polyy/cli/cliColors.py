# =========================================================
# --- cli_cliColors.py ---
# =========================================================

from typing import Tuple

# =========================================================

class TColor:
    """
    ANSI escape codes for terminal text coloring.

    Attributes:
        BLUE (str): Blue color for player 0.
        RED (str): Red color for player 1.
        RESET (str): Reset color to default terminal color.
        BOLD (str): Bold text formatting.
    """
    BLUE: str    = "\033[94m"   # Player 0
    RED: str     = "\033[91m"   # Player 1
    RESET: str   = "\033[0m"    # Reset formatting
    BOLD: str    = "\033[1m"    # Bold text


PLAYER: Tuple[str, str] = (
    f"{TColor.BLUE}(B)lue{TColor.RESET}",  # Player 0 display string
    f"{TColor.RED}(R)ed{TColor.RESET}"     # Player 1 display string
)

#: Field markers by colour (+1 player 0, -1 player 1, 0 empty)
FIELD_MARK = {
    1: f"{TColor.BLUE}B{TColor.RESET}",
    -1: f"{TColor.RED}R{TColor.RESET}",
    0: ".",
}
