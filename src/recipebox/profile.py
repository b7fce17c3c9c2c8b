"""Profile management for recipebox storage and logs."""

import os
from pathlib import Path
from typing import Optional


class Profile:
    """Manages profile-specific paths for recipebox.

    A profile determines where recipebox keeps its recipe file and logs.
    The active profile is determined by the RECIPEBOX_PROFILE environment
    variable, defaulting to "default" if not set. RECIPEBOX_HOME overrides
    the directory that holds all profiles.
    """

    def __init__(self, name: Optional[str] = None, home: Optional[Path] = None):
        """Initialize profile with given name or from environment.

        Args:
            name: Profile name. If None, uses RECIPEBOX_PROFILE env var or "default".
            home: Directory holding profile directories. If None, uses
                RECIPEBOX_HOME or ``data/`` in the project root.
        """
        self.name = name or os.getenv("RECIPEBOX_PROFILE", "default")
        if home is None:
            env_home = os.getenv("RECIPEBOX_HOME")
            home = Path(env_home) if env_home else self._find_project_root() / "data"
        self._data_root = Path(home) / self.name

        self._ensure_directories()

    def _find_project_root(self) -> Path:
        """Find project root by looking for pyproject.toml or .git."""
        current = Path(__file__).resolve().parent

        while current != current.parent:
            if (current / "pyproject.toml").exists() or (current / ".git").exists():
                return current
            current = current.parent

        # Fallback to parent of src directory
        return Path(__file__).parent.parent.parent

    def _ensure_directories(self) -> None:
        """Create profile directories if they don't exist."""
        self.data_root.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    @property
    def data_root(self) -> Path:
        """Root directory for profile data."""
        return self._data_root

    @property
    def data_file(self) -> Path:
        """Path to the JSON recipe collection."""
        return self._data_root / "recipes.json"

    @property
    def logs_dir(self) -> Path:
        """Directory for log files."""
        return self._data_root / "logs"

    @property
    def log_file(self) -> Path:
        """Path to the main recipebox log file."""
        return self.logs_dir / "recipebox.log"

    @property
    def log_level(self) -> str:
        """Level for the stderr log sink."""
        return os.getenv("RECIPEBOX_LOG_LEVEL", "ERROR").upper()

    @classmethod
    def current(cls) -> "Profile":
        """Get the current active profile."""
        return cls()

    def __str__(self) -> str:
        return f"Profile({self.name})"

    def __repr__(self) -> str:
        return f"Profile(name={self.name!r}, data_root={self._data_root!s})"
