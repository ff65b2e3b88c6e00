"""
Elapsed-time counter for a game session.

The engine never reads the clock: a presentation layer calls ``tick``
once per second and the counter stops itself once the game has ended.
"""
from dataclasses import dataclass

TIME_ANNOUNCEMENT_INTERVAL = 30


def _plural(amount: int, unit: str) -> str:
    return f"{amount} {unit}{'' if amount == 1 else 's'}"


def format_elapsed(seconds: int) -> str:
    """
    Format a duration for announcements.

    Minutes are the largest unit, games are not expected to run longer.

    Example:
        >>> format_elapsed(90)
        '1 minute and 30 seconds'
    """
    minutes, secs = divmod(seconds, 60)
    if minutes > 0:
        return f"{_plural(minutes, 'minute')} and {_plural(secs, 'second')}"
    return _plural(secs, "second")


@dataclass
class GameTimer:
    """Counts whole seconds while a game is in progress."""

    elapsed: int = 0
    running: bool = False

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def reset(self) -> None:
        """Stop and zero the counter."""
        self.elapsed = 0
        self.running = False

    def tick(self, ended: bool = False) -> int:
        """
        Advance by one second unless the game has ended.

        Args:
            ended: Whether the session has finished; stops the timer.

        Returns:
            Elapsed seconds after the tick.
        """
        if ended:
            self.running = False
        if self.running:
            self.elapsed += 1
        return self.elapsed

    def should_announce(self) -> bool:
        """True on every announcement interval boundary."""
        return self.elapsed > 0 and self.elapsed % TIME_ANNOUNCEMENT_INTERVAL == 0
