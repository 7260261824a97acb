"""Filename hint extraction from note URLs and candidate name generation"""

import re
from urllib.parse import unquote, urlsplit


FILE_RE = re.compile(r'(?:^|[?&])file=([^&]+)')
# Any URL this matches is already caught by FILE_RE; kept as the documented second rule.
VAULT_FILE_RE = re.compile(r'vault=([^&]+)&(?:.*&)?file=([^&]+)')


def _path_tail(url: str) -> str | None:
    """Last non-empty segment of the URL path, if any."""
    path = urlsplit(url).path.rstrip('/')
    if '/' not in path:
        return None
    return path.rsplit('/', 1)[1] or None


def extract_hint(url: str) -> str | None:
    """Return the percent-decoded note name referenced by url, or None.

    Tried in order: 'file=<name>', 'vault=<v>&...file=<name>', the last path segment.
    """
    m = FILE_RE.search(url)
    if m:
        raw = m.group(1)
    elif m := VAULT_FILE_RE.search(url):
        raw = m.group(2)
    else:
        raw = _path_tail(url)
    if not raw:
        return None
    return unquote(raw) or None


def basename(hint: str) -> str:
    return hint.rsplit('/', 1)[-1]


def hint_candidates(hint: str) -> list[str]:
    """Filenames to search for, most specific first, without duplicates."""
    base = basename(hint)
    return list(dict.fromkeys([f"{hint}.md", hint, base, f"{base}.md"]))
