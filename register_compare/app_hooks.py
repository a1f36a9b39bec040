from typing import Optional, Protocol


class AppHooks(Protocol):
    """
    Protocol for application hooks to follow a comparison run.

    This can be implemented by the calling application (for example a web
    report handler) to show progress while the facets run.

    Methods:
        report_step(info: str, target: int, reset_counter: bool, plus_step: int) -> None:
            Report progress of the comparison.
    """
    def report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 1) -> None:
        """
        Report progress messages from the comparison process.

        Args:
            info (str): Progress message.
            target (Optional[int]): Total number of steps, when starting a new phase.
            reset_counter (bool): Whether to reset the step counter.
            plus_step (int): Number of steps completed since the last report.
        """
        pass
