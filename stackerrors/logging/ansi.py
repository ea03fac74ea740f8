RESET = "\x1b[0m"

FG_RESET = "\x1b[39m"
FG_GREEN = "\x1b[32m"
FG_YELLOW = "\x1b[33m"
FG_BLUE = "\x1b[34m"
FG_CYAN_BOLD = "\x1b[1;36m"
FG_BRIGHT_BLACK = "\x1b[90m"

BG_RESET = "\x1b[49m"
BG_RED = "\x1b[41m"
