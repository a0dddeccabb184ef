"""Exceptions raised by the session manager, the chat assistant and the dispatcher."""


class BridgeError(Exception):
    """Base class for failures surfaced to callers as error envelopes."""


class SessionExistsError(BridgeError):
    def __init__(self, session_id: str):
        super().__init__(f'Browser with id "{session_id}" already exists')
        self.session_id = session_id


class SessionNotFoundError(BridgeError):
    def __init__(self, session_id: str):
        super().__init__(f'No browser found with id "{session_id}"')
        self.session_id = session_id


class UnsupportedBrowserError(BridgeError):
    def __init__(self, browser_type: str):
        super().__init__(f"Invalid browser type: {browser_type}")
        self.browser_type = browser_type


class UnknownToolError(BridgeError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ManagerClosedError(BridgeError):
    def __init__(self, session_id: str):
        super().__init__(f'Browser manager was shut down while launching "{session_id}"')
        self.session_id = session_id


class ImageSizeError(BridgeError):
    """Requested image size is not offered by the chosen model."""


class ImageGenerationError(BridgeError):
    """The image API call or one of the downloads failed."""


__all__ = [
    "BridgeError",
    "SessionExistsError",
    "SessionNotFoundError",
    "UnsupportedBrowserError",
    "UnknownToolError",
    "ManagerClosedError",
    "ImageSizeError",
    "ImageGenerationError",
]
