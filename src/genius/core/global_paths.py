"""Per-user directories used by the library.

Only the log directory is needed; it is resolved lazily so importing the
package never touches the filesystem.
"""

from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "genius-api"


class GlobalPath:
    """Directory lookups for genius-api."""

    @classmethod
    def log(cls) -> str:
        """Log file directory."""
        return user_log_dir(APP_NAME)

    @classmethod
    def ensure(cls, path: str) -> Path:
        directory = Path(path)
        directory.mkdir(parents=True, exist_ok=True)
        return directory
