"""
Error taxonomy for fetching, extraction and theme rendering.

Every error is terminal for the request that raised it. The HTTP layer turns
any ResumeError into a JSON error envelope without distinguishing kinds.
"""


class ResumeError(Exception):
    """Base class. str(exc) is the message shown to API clients."""


class FetchError(ResumeError):
    """Source document could not be retrieved or parsed."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"unable to fetch {url}: {reason}")


class ExtractionError(ResumeError):
    """A required piece of the profile page could not be mapped."""


class MissingFieldError(ExtractionError):
    """A required selector matched no node."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"unable to find {field}")


class MissingAttributeError(ExtractionError):
    """Node was found but lacks the expected attribute."""

    def __init__(self, field: str, attribute: str):
        self.field = field
        self.attribute = attribute
        super().__init__(f"unable to find {field}")


class MalformedTextError(ExtractionError):
    """Text did not split into the expected number of segments."""

    def __init__(self, field: str, text: str, pieces: list[str]):
        self.field = field
        self.text = text
        self.pieces = pieces
        super().__init__(f"invalid {field} '{text}': {pieces!r}")


class ThemeRenderError(ResumeError):
    """Theme service could not be reached."""

    def __init__(self, theme: str, reason: str):
        self.theme = theme
        self.reason = reason
        super().__init__(f"unable to render theme '{theme}': {reason}")
