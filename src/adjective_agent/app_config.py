"""App-specific data paths for persisted vocabularies.

Each app keeps its learned vocabulary apart from other apps' so that, for
example, a travel archive and a product catalog do not share adjectives.

Example:
    >>> from adjective_agent.app_config import AppConfig
    >>> config = AppConfig("travel-archive")
    >>> config.vocab_snapshot
    PosixPath('/home/me/.travel-archive/data/vocabulary.json')  # doctest: +SKIP
"""

from pathlib import Path

from adjective_agent.constants import APP_NAME


class AppConfig:
    """App-specific configuration for data paths.

    Layout:
    - ~/.{app_name}/data/vocabulary.json - Vocabulary snapshot

    Args:
        app_name: Unique app identifier (e.g., 'travel-archive')
        base_dir: Override base directory (default: ~/.{app_name})
    """

    def __init__(
        self,
        app_name: str = APP_NAME,
        base_dir: Path | None = None,
    ):
        self.app_name = app_name
        self._base_dir = Path(base_dir) if base_dir else Path.home() / f".{app_name}"
        self._data_dir = self._base_dir / "data"

    @property
    def base_dir(self) -> Path:
        """Base directory for all app data."""
        return self._base_dir

    @property
    def data_dir(self) -> Path:
        """Data directory (created on access)."""
        self._data_dir.mkdir(parents=True, exist_ok=True)
        return self._data_dir

    @property
    def vocab_snapshot(self) -> Path:
        """Path to the persisted vocabulary snapshot."""
        return self.data_dir / "vocabulary.json"

    def __repr__(self) -> str:
        return f"AppConfig(app_name={self.app_name!r}, base_dir={self._base_dir})"
