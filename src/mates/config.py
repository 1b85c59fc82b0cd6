"""Configuration from the environment.

MATES_DIR     the vdir holding one file per contact (required)
MATES_INDEX   the index file (default: ~/.mates_index)
MATES_EDITOR  editor command for `mates edit` (falls back to EDITOR)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from mates.errors import ConfigError

DEFAULT_INDEX = "~/.mates_index"


def _expand(value: str) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(value)))


@dataclass(frozen=True)
class Configuration:
    """Paths and commands a mates invocation works with."""

    vdir_path: Path
    index_path: Path
    editor_cmd: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Configuration":
        """Read the configuration from environment variables.

        Raises:
            ConfigError: If MATES_DIR is not set
        """
        env = os.environ if environ is None else environ

        vdir = (env.get("MATES_DIR") or "").strip()
        if not vdir:
            raise ConfigError("MATES_DIR must be set to your contact directory")

        index = (env.get("MATES_INDEX") or "").strip() or DEFAULT_INDEX
        editor = (env.get("MATES_EDITOR") or env.get("EDITOR") or "").strip() or None

        return cls(vdir_path=_expand(vdir), index_path=_expand(index), editor_cmd=editor)

    def require_editor(self) -> str:
        """Return the editor command, or fail if none is configured."""
        if not self.editor_cmd:
            raise ConfigError("MATES_EDITOR or EDITOR must be set to edit contacts")
        return self.editor_cmd
