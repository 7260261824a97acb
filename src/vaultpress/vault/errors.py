"""Resolver failure types"""


class ResolveError(LookupError):
    """Base class for vault lookups that cannot produce note content."""


class HintNotFound(ResolveError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Could not extract a filename from URL: {url}")


class EntryNotFound(ResolveError):
    def __init__(self, hint: str, candidates: list[str]):
        self.hint = hint
        self.candidates = candidates
        super().__init__(f"File not found in vault: {hint} (tried {', '.join(candidates)})")


class ReadFailure(ResolveError):
    def __init__(self, name: str, cause: Exception):
        self.name = name
        super().__init__(f"File found but unreadable: {name}: {cause}")
