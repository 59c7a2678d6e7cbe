import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ConfigLoadFailure
from .logger import setup_logger

_logger = setup_logger()

CONFIG_ENV = "PACWRAP_CONFIG"


def default_config_path() -> Path:
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    return Path.home() / ".config" / "pacwrap" / "pacwrap.conf"


@dataclass(frozen=True)
class Config:
    """Settings for one invocation. Built once, then only read."""

    dry_run: bool = False
    needed: bool = False
    no_confirm: bool = False
    no_cache: bool = False
    default_pm: Optional[str] = None

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Read the dotfile, writing a default one first if it does not exist."""
        path = Path(path) if path else default_config_path()
        if not path.exists():
            _logger.debug(f"Config file {path} not found. Creating default config.")
            cls()._write(path)
            return cls()

        parser = configparser.ConfigParser()
        try:
            with path.open(encoding="utf-8") as f:
                parser.read_file(f)
            default_pm = parser.get("general", "default_pm", fallback="").strip()
            return cls(
                dry_run=parser.getboolean("general", "dry_run", fallback=False),
                needed=parser.getboolean("general", "needed", fallback=False),
                no_confirm=parser.getboolean("general", "no_confirm", fallback=False),
                no_cache=parser.getboolean("general", "no_cache", fallback=False),
                # Handle empty strings mapping to None
                default_pm=default_pm or None,
            )
        except (OSError, configparser.Error, ValueError, UnicodeDecodeError) as e:
            raise ConfigLoadFailure(path, str(e)) from e

    def merge(
        self,
        dry_run: bool = False,
        needed: bool = False,
        no_confirm: bool = False,
        no_cache: bool = False,
        using: Optional[str] = None,
    ) -> "Config":
        """Overlay CLI flags on top of the dotfile values; the CLI wins."""
        return Config(
            dry_run=dry_run or self.dry_run,
            needed=needed or self.needed,
            no_confirm=no_confirm or self.no_confirm,
            no_cache=no_cache or self.no_cache,
            default_pm=using or self.default_pm,
        )

    def _write(self, path: Path) -> None:
        parser = configparser.ConfigParser()
        parser["general"] = {
            "dry_run": str(self.dry_run).lower(),
            "needed": str(self.needed).lower(),
            "no_confirm": str(self.no_confirm).lower(),
            "no_cache": str(self.no_cache).lower(),
            "default_pm": self.default_pm or "",
        }
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                parser.write(f)
        except OSError as e:
            _logger.warning(f"Could not write default config to {path}: {e}")
            return
        _logger.debug(f"Default config written to {path}")
