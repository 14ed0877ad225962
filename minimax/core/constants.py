# minimax/core/constants.py

# --- Board Dimensions ---
ROWS = 6
COLS = 7
# Pieces in a row needed to win
CONNECT = 4

# --- Cell Values ---
EMPTY = 0

# --- Scoring System ---
# Logic: Score = +/- WIN_SCORE * empty cells left on the board
# Win with 35 empty cells  = +350000
# Loss with 35 empty cells = -350000
# Positional sums stay far below this on a 6x7 board (at most 69 windows * 4 cells = 276)
WIN_SCORE = 10000
