"""Configuration from the environment and .env files.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if given).
  3. .env file found walking up from cwd, stopping at the nearest .git.

Recognised variables supply CLI defaults; explicit flags always win:
  GBTILE_OUTPUT_TYPE   header | gbdk | asm | rgbds
  GBTILE_STRATEGY      quantizer name (see `gbtile --list-strategies`)
  GBTILE_STRICT        1/true/yes to enforce the four-colour budget
  GBTILE_TRUNCATE      1/true/yes to drop partial edge tiles
"""

import os
from dataclasses import dataclass
from pathlib import Path

from gbtile.core.types import OutputFormat

TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass
class Settings:
    output_format: OutputFormat = OutputFormat.HEADER
    strategy: str = 'luminance'
    strict: bool = False
    truncate: bool = False


def find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above start, not crossing a .git boundary."""
    for directory in [start.resolve(), *start.resolve().parents]:
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a clone, a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value lines; quotes stripped, comments and junk lines skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Merge a .env into os.environ without overriding. Returns the file used."""
    path = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None
    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _flag(name: str) -> bool:
    return os.environ.get(name, '').strip().lower() in TRUTHY


def settings_from_env() -> Settings:
    return Settings(
        output_format=OutputFormat.parse(os.environ.get('GBTILE_OUTPUT_TYPE')),
        strategy=os.environ.get('GBTILE_STRATEGY', '').strip() or 'luminance',
        strict=_flag('GBTILE_STRICT'),
        truncate=_flag('GBTILE_TRUNCATE'),
    )
