from __future__ import annotations

from pathlib import Path
from types import TracebackType
from typing import Callable

import httpx
from loguru import logger

from .config import DEFAULT_CONFIG, RunnerConfig
from .errors import InitializationError, InputFetchError

SESSION_PROMPT = (
    "In order to download the inputs from the Advent of Code website, this program requires "
    "your session cookie.\n"
    "Please log into the Advent of Code website, then check your browser cookies and enter the "
    "value of the 'session' cookie now."
)


def load_or_prompt_session(
    session_file: Path,
    prompt: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> str:
    """Read the session cookie from `session_file`, asking for it if the file doesn't exist yet.

    The value entered at the prompt is trimmed and written to `session_file`, so the prompt
    only ever happens once per working directory.

    Args:
        session_file: Where the session cookie is persisted.
        prompt: Reads one line from the user.
        echo: Shows the instructions to the user.

    Returns:
        The trimmed session cookie value.

    Raises:
        InitializationError: If the file can't be read or written, or the entered value is empty.
    """
    try:
        if session_file.exists():
            logger.debug("Session file found at {}", session_file)
            session = session_file.read_text(encoding="utf-8").strip()
            if not session:
                raise InitializationError(f"Session file {session_file} is empty")
            return session

        logger.info("Session file not found, prompting for session cookie value")
        echo(SESSION_PROMPT)
        session = prompt("Session cookie: ").strip()
        if not session:
            raise InitializationError("No session cookie entered")

        logger.info("Session cookie provided, saving to {}", session_file)
        session_file.write_text(session, encoding="utf-8")
        return session
    except (OSError, EOFError) as e:
        raise InitializationError(f"Could not set up session file {session_file}: {e}") from e


class AocEnvironment:
    """Resolves puzzle inputs, either from the local cache or from the Advent of Code website.

    Notes:
        - Cached inputs are never refreshed; delete the file under the inputs directory to
            download it again.
        - There's no locking around the cache, so two runs sharing a working directory may both
            download the same input.
    """

    def __init__(
        self,
        year: int,
        inputs_dir: Path,
        session: str,
        client: httpx.Client | None = None,
        config: RunnerConfig = DEFAULT_CONFIG,
    ) -> None:
        self.year = year
        self.inputs_dir = inputs_dir
        self.config = config
        self._session_cookie = f"session={session}"
        self._client = client if client is not None else httpx.Client(timeout=None)

    @classmethod
    def initialize(
        cls,
        year: int,
        working_dir: Path | None = None,
        *,
        config: RunnerConfig = DEFAULT_CONFIG,
        prompt: Callable[[str], str] = input,
        echo: Callable[[str], None] = print,
        client: httpx.Client | None = None,
    ) -> AocEnvironment:
        """Prepare the inputs directory and session cookie under `working_dir`.

        Raises:
            InitializationError: If the directories or files can't be created or read.
        """
        try:
            working_dir = working_dir if working_dir is not None else Path.cwd()
            logger.debug("Working directory: {}", working_dir)
            inputs_dir = working_dir / config.inputs_dirname
            if not inputs_dir.exists():
                logger.info("Creating inputs directory at {}", inputs_dir)
                inputs_dir.mkdir(parents=True)
        except OSError as e:
            raise InitializationError(f"Could not create inputs directory: {e}") from e

        session = load_or_prompt_session(working_dir / config.session_filename, prompt, echo)
        return cls(year, inputs_dir, session, client=client, config=config)

    def input_path(self, day: int) -> Path:
        return self.inputs_dir / self.config.input_filename(day)

    def fetch_input(self, day: int) -> str:
        """Return the puzzle input for `day`, downloading and caching it if necessary.

        Raises:
            InputFetchError: If the cache can't be read or written, or the download fails.
        """
        path = self.input_path(day)
        logger.debug("Checking for input file for day {} at {}", day, path)
        try:
            if path.exists():
                logger.debug("Input file found")
                return path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputFetchError(day, f"could not read cached input {path}: {e}") from e

        body = self._download(day)
        try:
            input_text = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InputFetchError(day, f"downloaded input is not valid UTF-8: {e}") from e

        logger.info("Saving input to {}", path)
        try:
            path.write_bytes(body)
        except OSError as e:
            raise InputFetchError(day, f"could not write cached input {path}: {e}") from e
        return input_text

    def _download(self, day: int) -> bytes:
        url = self.config.input_url(self.year, day)
        logger.info("Input file not found, fetching {}", url)
        try:
            response = self._client.get(
                url,
                headers={"Cookie": self._session_cookie, "User-Agent": self.config.user_agent},
            )
        except httpx.HTTPError as e:
            raise InputFetchError(day, f"request to {url} failed: {e}") from e

        if not response.is_success:
            raise InputFetchError(day, f"failed to fetch input: HTTP {response.status_code}")
        return response.content

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> AocEnvironment:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ("AocEnvironment", "load_or_prompt_session", "SESSION_PROMPT")
