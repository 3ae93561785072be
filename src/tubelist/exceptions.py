"""
Custom exceptions for the tubelist application.

This module defines domain-specific exceptions for playlist resolution and
extraction, including invalid queries, unsupported playlist kinds, upstream
alerts, and network failures.
"""

from __future__ import annotations

from pathlib import Path


class TubelistError(Exception):
    """Base exception for all tubelist errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize TubelistError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class InvalidQueryError(TubelistError):
    """
    Exception raised when a query cannot be interpreted as a playlist reference.

    Raised for empty or non-string input, links to unknown hosts, malformed
    ``list`` query parameters, and URL shapes that carry no playlist or
    channel identifier. Never retried.

    Attributes
    ----------
    message : str
        Human-readable error message.
    query : object
        The query that failed to resolve.

    Examples
    --------
    >>> try:
    ...     await resolve_playlist_id("https://example.com/playlist?list=PL...")
    ... except InvalidQueryError as e:
    ...     print(f"Rejected {e.query!r}: {e.message}")
    """

    def __init__(
        self,
        message: str = "Invalid playlist query",
        query: object = None,
    ) -> None:
        """
        Initialize InvalidQueryError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Invalid playlist query").
        query : object, optional
            The query that failed to resolve (default: None).
        """
        self.query = query
        super().__init__(message)


class UnsupportedMixError(InvalidQueryError):
    """Exception raised for radio-mix (``RD``) playlists, which are not supported."""

    def __init__(
        self,
        message: str = "Mixes not supported!",
        query: object = None,
    ) -> None:
        super().__init__(message, query=query)


class UnresolvableReferenceError(TubelistError):
    """
    Exception raised when a channel reference page carries no channel ID.

    Attributes
    ----------
    message : str
        Human-readable error message.
    reference : str
        The profile URL that was fetched.
    """

    def __init__(self, reference: str, message: str | None = None) -> None:
        """
        Initialize UnresolvableReferenceError.

        Parameters
        ----------
        reference : str
            The profile URL that was fetched.
        message : str | None, optional
            Human-readable error message. Defaults to a message naming
            the reference.
        """
        self.reference = reference
        super().__init__(message or f"Unable to resolve the ref: {reference}!")


class UnknownPlaylistError(TubelistError):
    """
    Exception raised when the playlist page has no sidebar section.

    A structurally absent sidebar means the target does not exist or is
    fundamentally incompatible, so this error is never retried.
    """

    def __init__(self, message: str = "Unknown Playlist!", list_id: str | None = None) -> None:
        self.list_id = list_id
        super().__init__(message)


class EmptyPlaylistError(TubelistError):
    """Exception raised when no item list section is found in the playlist page."""

    def __init__(self, message: str = "Empty playlist!") -> None:
        super().__init__(message)


class PlaylistParseError(TubelistError):
    """
    Exception raised when an expected renderer is missing from playlist data.

    Attributes
    ----------
    message : str
        Human-readable error message.
    renderer : str | None
        Name of the missing renderer.
    """

    def __init__(self, message: str = "Malformed playlist data", renderer: str | None = None) -> None:
        self.renderer = renderer
        super().__init__(message)


class UnsupportedPlaylistError(TubelistError):
    """
    Exception raised when no playlist data could be recovered after all retries.

    Attributes
    ----------
    message : str
        Human-readable error message.
    dump_path : Path | None
        Location of the diagnostic dump of the raw response, if one was
        written.
    """

    def __init__(
        self,
        message: str = "Unsupported playlist!",
        dump_path: Path | None = None,
    ) -> None:
        """
        Initialize UnsupportedPlaylistError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Unsupported playlist!").
        dump_path : Path | None, optional
            Location of the diagnostic dump (default: None).
        """
        self.dump_path = dump_path
        super().__init__(message)


class PlaylistAlertError(TubelistError):
    """
    Exception carrying an error alert surfaced by YouTube itself.

    Used for private, deleted or otherwise unavailable playlists. The
    message is the alert text verbatim; the error is authoritative and
    never retried.

    Examples
    --------
    >>> try:
    ...     await client.search("PLprivate...")
    ... except PlaylistAlertError as e:
    ...     print(e.alert_text)  # "The playlist does not exist."
    """

    def __init__(self, alert_text: str) -> None:
        self.alert_text = alert_text
        super().__init__(alert_text)


class PlaylistSearchError(TubelistError):
    """Exception raised when a free-text playlist search fails."""

    def __init__(self, query: str, message: str | None = None) -> None:
        self.query = query
        super().__init__(message or f"Unable to find playlists with name '{query}'!")


class NetworkError(TubelistError):
    """
    Exception raised for network-related failures.

    Wraps transport errors such as connection timeouts, DNS failures,
    and undecodable responses.

    Attributes
    ----------
    message : str
        Human-readable error message.
    original_error : Exception | None
        The original exception that caused this error.
    url : str | None
        The URL being requested when the failure occurred.

    Examples
    --------
    >>> try:
    ...     body = await transport.get_text(url)
    ... except NetworkError as e:
    ...     print(f"Request to {e.url} failed: {e.message}")
    """

    def __init__(
        self,
        message: str = "Network error occurred",
        original_error: Exception | None = None,
        url: str | None = None,
    ) -> None:
        """
        Initialize NetworkError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Network error occurred").
        original_error : Exception | None, optional
            The original exception that caused this error (default: None).
        url : str | None, optional
            The URL being requested (default: None).
        """
        self.original_error = original_error
        self.url = url
        super().__init__(message)


# Exit codes for CLI commands
EXIT_CODE_SUCCESS = 0
EXIT_CODE_GENERAL_ERROR = 1
EXIT_CODE_INVALID_QUERY = 2
EXIT_CODE_NETWORK_ERROR = 3
EXIT_CODE_PLAYLIST_ERROR = 4
EXIT_CODE_INTERRUPTED = 130  # Standard Unix signal interrupt exit code
