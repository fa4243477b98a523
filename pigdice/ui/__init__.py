"""Console front end: prompts and event display."""

from pigdice.ui.display import ConsoleDisplay
from pigdice.ui.prompts import ConsoleInput, ScriptedInput, ask_hold, get_player_name

__all__ = ["ConsoleDisplay", "ConsoleInput", "ScriptedInput", "ask_hold", "get_player_name"]
