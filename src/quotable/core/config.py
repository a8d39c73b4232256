"""quotable configuration."""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import IO

import structlog

USER_CONFIG = Path.home() / ".quotable" / "config"
PROJECT_CONFIG_NAME = ".quotable"
ENV_CONFIG = "QUOTABLE_CONFIG"

FORMATS = ("shell", "c", "hex", "ascii")
DEFAULT_FORMAT = "shell"
DEFAULT_SEPARATOR = "\n"


@dataclass
class Config:
    """Parsed configuration."""

    format: str = DEFAULT_FORMAT  # one of FORMATS
    separator: str = DEFAULT_SEPARATOR
    log: Path | None = None  # None = no logging
    verbose: bool = False
    explicit: frozenset[str] = field(default=frozenset(), compare=False)
    """Settings named by a `set` directive, so overlays can restore defaults."""


# === Config Loading ===


def _find_project_config(cwd: Path) -> Path | None:
    """Walk up from cwd to find .quotable file."""
    current = cwd.resolve()
    while True:
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:  # reached root
            return None
        current = parent


def _merge_configs(base: Config, overlay: Config) -> Config:
    """Merge overlay config into base. Settings the overlay sets win."""
    changes = {key: getattr(overlay, key) for key in overlay.explicit}
    return replace(base, **changes, explicit=base.explicit | overlay.explicit)


def _load_file(path: Path) -> Config:
    try:
        return parse_config(path.read_text())
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from None


def load_config(cwd: Path) -> Config:
    """Load config from ~/.quotable/config, .quotable, and $QUOTABLE_CONFIG. Last match wins."""
    config = Config()

    # 1. User config (lowest priority)
    if USER_CONFIG.is_file():
        config = _merge_configs(config, _load_file(USER_CONFIG))

    # 2. Project config (walk up from cwd)
    project_path = _find_project_config(cwd)
    if project_path is not None:
        config = _merge_configs(config, _load_file(project_path))

    # 3. Env override (highest priority)
    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        env_config_path = Path(env_path).expanduser()
        if env_config_path.is_file():
            config = _merge_configs(config, _load_file(env_config_path))

    return config


def parse_config(text: str) -> Config:
    """Parse config text into Config object. Raises ValueError on syntax errors."""
    settings: dict[str, bool | str | Path] = {}

    for lineno, raw_line in enumerate(text.splitlines(), 1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split(None, 1)
        directive = parts[0].lower()
        rest = parts[1].strip() if len(parts) > 1 else ""

        try:
            if directive == "set":
                _apply_setting(settings, rest)
            else:
                raise ValueError(f"unknown directive '{directive}'")
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from None

    return Config(
        format=settings.get("format", DEFAULT_FORMAT),
        separator=settings.get("separator", DEFAULT_SEPARATOR),
        log=settings.get("log"),
        verbose=settings.get("verbose", False),
        explicit=frozenset(settings),
    )


_SEPARATOR_ESCAPES = {"n": "\n", "t": "\t", "s": " ", "\\": "\\"}


def unescape_separator(s: str) -> str:
    """Unescape \\n, \\t, \\s (space) and \\\\ in a separator value."""
    result = []
    i = 0
    while i < len(s):
        if s[i] == "\\" and i + 1 < len(s) and s[i + 1] in _SEPARATOR_ESCAPES:
            result.append(_SEPARATOR_ESCAPES[s[i + 1]])
            i += 2
            continue
        result.append(s[i])
        i += 1
    return "".join(result)


def _apply_setting(settings: dict[str, bool | str | Path], rest: str) -> None:
    """Parse and apply a 'set' directive. Raises ValueError on invalid setting."""
    if not rest:
        raise ValueError("'set' requires a setting name")

    parts = rest.split(None, 1)
    key = parts[0].lower()
    value = parts[1] if len(parts) > 1 else None

    # Boolean settings (no value required)
    if key == "verbose":
        if value is not None:
            raise ValueError(f"'{key}' takes no value")
        settings[key] = True

    # Choice settings
    elif key == "format":
        if value not in FORMATS:
            choices = ", ".join(f"'{f}'" for f in FORMATS)
            raise ValueError(f"'format' must be one of {choices}, got '{value}'")
        settings[key] = value

    elif key == "separator":
        if value is None:
            raise ValueError("'separator' requires a value")
        settings[key] = unescape_separator(value)

    # Path settings
    elif key == "log":
        if value is None:
            raise ValueError("'log' requires a path")
        settings[key] = Path(value).expanduser()

    else:
        raise ValueError(f"unknown setting '{key}'")


# === Logging ===

_logger: structlog.BoundLogger | None = None
_log_file: IO[str] | None = None


def configure_logging(config: Config) -> None:
    """Configure logging based on config settings, closing any previous log file."""
    global _logger, _log_file
    _logger = None
    if _log_file is not None:
        _log_file.close()
        _log_file = None
    if config.log is None:
        return

    # Ensure log directory exists; OSError propagates to the caller
    config.log.parent.mkdir(parents=True, exist_ok=True)
    _log_file = config.log.open("a")

    # Configure structlog for JSON lines appended to the log file
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.BoundLogger,
        logger_factory=structlog.WriteLoggerFactory(file=_log_file),
        cache_logger_on_first_use=False,
    )
    _logger = structlog.get_logger()


def log_event(event: str, **kwargs) -> None:
    """Log an event. No-op if logging not configured."""
    if _logger is None:
        return
    _logger.info(event, **kwargs)
