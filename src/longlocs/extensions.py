"""Extension filter used to select which files are scanned."""
from collections.abc import Iterable

NO_EXTENSION = "."


def normalize_extension(token: str) -> str:
    """Strip surrounding whitespace and one leading dot from an extension.

    Args:
        token: Raw extension as supplied by the user, e.g. " .go"

    Returns:
        Normalized extension, e.g. "go"
    """
    token = token.strip()
    if token.startswith("."):
        token = token[1:]
    return token


def parse_extensions(raw: str | Iterable[str]) -> frozenset[str]:
    """Build the extension set from a comma-separated list.

    Empty tokens are dropped, so "go," and "go" are equivalent. A bare "."
    explicitly selects files without an extension. An empty result is not
    an error here; callers decide whether to reject it.

    Args:
        raw: Comma-separated string ("go, .py") or an iterable of tokens

    Returns:
        Frozen set of normalized extensions
    """
    tokens = raw.split(",") if isinstance(raw, str) else raw
    extensions = set()
    for token in tokens:
        if token.strip() == NO_EXTENSION:
            extensions.add("")
            continue
        extension = normalize_extension(token)
        if extension:
            extensions.add(extension)
    return frozenset(extensions)


def get_extension(filename: str) -> str:
    """Return the part of the base name after its final dot.

    Args:
        filename: File name or slash-separated path

    Returns:
        Extension without the dot, or "" if the name has no dot
    """
    base = filename.rsplit("/", 1)[-1]
    _, dot, extension = base.rpartition(".")
    return extension if dot else ""


def matches(extensions: frozenset[str], filename: str) -> bool:
    """Check whether a file should be scanned.

    Comparison is exact and case-sensitive: "JS" does not match "js". A
    file without an extension only matches when "" was explicitly selected.

    Args:
        extensions: Normalized extension set
        filename: File name or slash-separated path

    Returns:
        True if the file's extension is in the set
    """
    return get_extension(filename) in extensions
