"""Markdown logger for gameplay events (collisions, crossings, avatar changes)."""

import datetime


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str, debug: bool = False):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        debug : bool, optional
            Echo debug messages to stdout
        """
        self.log_file = log_file
        self.debug_enabled = debug
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Bug Crossing Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Gameplay Events\n\n")
                f.write("| Timestamp | Event | Position | Details |\n")
                f.write("|-----------|-------|----------|---------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, event: str, position: str, details: str) -> None:
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {position} | {details} |\n")
        except Exception as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_collision(self, lane: int, x: float, count: int) -> None:
        """
        Log a bug hitting the player.

        Parameters
        ----------
        lane : int
            Lane of the bug that hit
        x : float
            Bug x position at the time of the hit
        count : int
            Collision counter after the hit
        """
        self._write_row("COLLISION", f"lane {lane}, x={x:.1f}", f"Bug hits: {count}")

    def log_goal(self, col: int, count: int) -> None:
        """Log the player reaching the water row."""
        self._write_row("GOAL", f"({col}, 0)", f"Crossings: {count}")

    def log_avatar(self, index: int, sprite: str) -> None:
        self._write_row("AVATAR", "-", f"#{index} {sprite}")

    def log_pause(self, paused: bool) -> None:
        self._write_row("PAUSE" if paused else "RESUME", "-", "SYSTEM")

    def set_score(self, counter: str, value: int) -> None:
        """Score sink hook: record every published counter."""
        self._write_row("SCORE", "-", f"{counter} = {value}")

    def debug(self, msg: str) -> None:
        if self.debug_enabled:
            print(msg)
