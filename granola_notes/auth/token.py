"""Read the Granola access token from the desktop app's local config."""

from __future__ import annotations

import errno
import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Sequence

from granola_notes.config import CONFIG_PATH_ENV, Settings

from .redaction import sanitize_error_message

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "supabase.json"
CONTAINER_MOUNT = Path("/granola-config") / CONFIG_FILENAME

RETRYABLE_ERRNOS = frozenset({errno.EBUSY, errno.EACCES, errno.EAGAIN, errno.EMFILE, errno.ENFILE})

Sleep = Callable[[float], None]


class TokenParseError(ValueError):
    """Raised when a config file does not contain a usable token."""


class TokenRetrievalError(RuntimeError):
    """Raised when no candidate config file yields an access token."""

    def __init__(self, message: str, *, searched_paths: Sequence[Path] = ()) -> None:
        super().__init__(message)
        self.searched_paths = tuple(searched_paths)


def candidate_config_paths(settings: Settings | None = None) -> list[Path]:
    """Return config paths in lookup order.

    The environment override comes first, then container mount points, then
    the macOS application-support location.
    """
    cfg = settings or Settings()
    home = cfg.home or Path.home()
    paths = [
        CONTAINER_MOUNT,
        home / "granola-config" / CONFIG_FILENAME,
    ]
    if cfg.config_path is not None:
        paths.insert(0, cfg.config_path)
    paths.append(home / "Library" / "Application Support" / "Granola" / CONFIG_FILENAME)
    return paths


def read_file_with_retry(
    path: str | Path,
    *,
    max_retries: int = 3,
    delay: float = 0.1,
    sleep: Sleep = time.sleep,
) -> str:
    """Read ``path`` as UTF-8, retrying transient failures with exponential back-off."""
    attempt = 0
    while True:
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            if exc.errno not in RETRYABLE_ERRNOS or attempt >= max_retries:
                raise
            wait = delay * (2**attempt)
            logger.warning(
                "Transient error reading %s (%s); retrying in %.3fs",
                path,
                errno.errorcode.get(exc.errno, exc.errno),
                wait,
            )
            sleep(wait)
            attempt += 1


def parse_access_token(text: str) -> str:
    """Extract ``access_token`` from a Granola config document.

    WorkOS tokens are preferred over the older Cognito envelope. Either may be
    stored as a nested JSON string or as an object.
    """
    data = json.loads(text)
    raw_tokens = _token_envelope(data)
    try:
        if isinstance(raw_tokens, str):
            tokens = json.loads(raw_tokens)
        elif isinstance(raw_tokens, (dict, list)):
            tokens = raw_tokens
        else:
            raise TokenParseError("No valid token data found (expected workos_tokens or cognito_tokens)")
    except (TokenParseError, json.JSONDecodeError) as exc:
        raise TokenParseError(
            f"Failed to parse local access token: {sanitize_error_message(str(exc))}"
        ) from None

    access_token = tokens.get("access_token") if isinstance(tokens, dict) else None
    if not isinstance(access_token, str) or not access_token:
        raise TokenParseError("Access token not found in configuration file")
    return access_token


def get_access_token(
    settings: Settings | None = None,
    *,
    sleep: Sleep = time.sleep,
) -> str:
    """Return the current access token, re-reading the config on every call.

    Tokens rotate, so nothing is cached. Each candidate path is tried in
    order; the first one that yields a token wins.
    """
    cfg = settings or Settings()
    paths = candidate_config_paths(cfg)
    last_error: Exception | None = None

    for path in paths:
        logger.debug("Looking for Granola token in %s", path)
        try:
            text = read_file_with_retry(
                path,
                max_retries=cfg.read_retries,
                delay=cfg.retry_delay,
                sleep=sleep,
            )
            return parse_access_token(text)
        except (OSError, ValueError) as exc:
            last_error = exc
            continue

    detail = (
        sanitize_error_message(str(last_error))
        if last_error is not None and str(last_error)
        else "Configuration file not found or invalid format"
    )
    raise TokenRetrievalError(_failure_message(paths, detail), searched_paths=paths) from None


def _token_envelope(data: Any) -> Any:
    if not isinstance(data, dict):
        return None
    workos = data.get("workos_tokens")
    return workos if workos is not None else data.get("cognito_tokens")


def _failure_message(paths: Sequence[Path], detail: str) -> str:
    searched = "\n".join(f"  - {path}" for path in paths)
    return (
        "Failed to find Granola authentication token.\n"
        f"Searched paths:\n{searched}\n\n"
        "For container usage, mount your host Granola config:\n"
        'docker run -v "$HOME/Library/Application Support/Granola:/granola-config:ro" your-image\n\n'
        "Or set custom path:\n"
        f'export {CONFIG_PATH_ENV}="/path/to/supabase.json"\n\n'
        "Make sure Granola desktop app is running and you're logged in on the host machine.\n"
        f"Last error: {detail}"
    )


__all__ = [
    "CONTAINER_MOUNT",
    "RETRYABLE_ERRNOS",
    "TokenParseError",
    "TokenRetrievalError",
    "candidate_config_paths",
    "get_access_token",
    "parse_access_token",
    "read_file_with_retry",
]
