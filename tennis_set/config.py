POINT_LABELS = ("0", "15", "30", "40")

GAME_POINTS_TO_WIN = 4
TIE_BREAK_POINTS_TO_WIN = 7
SET_GAMES_TO_WIN = 6
TIE_BREAK_AT_GAMES = 6
MIN_LEAD = 2

# Equal counts below this render as "<label>-all"
DEUCE_THRESHOLD = 3

NOT_STARTED_LABEL = "Ready to start..."

DEFAULT_PLAYER_1 = "player 1"
DEFAULT_PLAYER_2 = "player 2"
