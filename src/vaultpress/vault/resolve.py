"""Vault note lookup: candidate filenames searched depth-first through a VaultTree"""

import logging

from vaultpress.vault.errors import EntryNotFound, HintNotFound, ReadFailure
from vaultpress.vault.hints import extract_hint, hint_candidates
from vaultpress.vault.tree import Node, VaultTree


logger = logging.getLogger(__name__)


def _children(tree: VaultTree, directory: Node) -> list[Node]:
    try:
        return tree.list_children(directory)
    except OSError as e:
        raise ReadFailure(tree.name(directory), e) from e


def _search(tree: VaultTree, children: list[Node], filename: str, log: logging.Logger) -> Node | None:
    """Depth-first search for a file named filename: direct children, then each subdirectory.

    Subdirectories that cannot be listed are logged and skipped.
    """
    for child in children:
        if not tree.is_directory(child) and tree.name(child) == filename:
            return child
    for child in children:
        if not tree.is_directory(child):
            continue
        try:
            grandchildren = tree.list_children(child)
        except OSError as e:
            log.warning("Skipping unreadable folder %s: %s", tree.name(child), e)
            continue
        found = _search(tree, grandchildren, filename, log)
        if found is not None:
            return found
    return None


def find_entry(tree: VaultTree, root: Node, hint: str, log: logging.Logger = None) -> Node | None:
    """Return the first file matching any candidate name for hint, trying candidates in order.

    Raises ReadFailure only when root itself cannot be listed.
    """
    log = log or logger
    children = _children(tree, root)
    for candidate in hint_candidates(hint):
        log.debug("Searching vault for %r", candidate)
        found = _search(tree, children, candidate, log)
        if found is not None:
            return found
    return None


def read_entry(tree: VaultTree, node: Node) -> str:
    """Read a whole file node as UTF-8 text; any I/O or decode error becomes ReadFailure."""
    try:
        return tree.read_content(node).decode('utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailure(tree.name(node), e) from e


def _locate(tree: VaultTree, hint: str, log: logging.Logger) -> Node:
    node = find_entry(tree, tree.root, hint, log)
    if node is None:
        raise EntryNotFound(hint, hint_candidates(hint))
    log.debug("Resolved %r to %r", hint, tree.name(node))
    return node


def resolve(tree: VaultTree, hint: str, log: logging.Logger = None) -> str:
    """Return the content of the note hint refers to.

    Raises EntryNotFound when no candidate exists anywhere in the tree and
    ReadFailure when one was found but could not be read.
    """
    return read_entry(tree, _locate(tree, hint, log or logger))


def resolve_url(tree: VaultTree, url: str, log: logging.Logger = None) -> tuple[str, str]:
    """Extract the hint from url and resolve it. Returns (entry_name, content)."""
    hint = extract_hint(url)
    if hint is None:
        raise HintNotFound(url)
    node = _locate(tree, hint, log or logger)
    return tree.name(node), read_entry(tree, node)
