from typing import Protocol


class Launcher(Protocol):
    def open(self, url: str) -> None:
        """
        Open `url` for the user. Raises LaunchError when nothing could
        be opened.
        """
