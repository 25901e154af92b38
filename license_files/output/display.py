"""Printable forms of filenames from directory listings."""


def display_name(name: str) -> str:
    """Make a filename safe to print or serialize.

    Listings of non-UTF-8 names carry lone surrogates (``os.listdir``
    decodes with surrogateescape); those bytes become U+FFFD here.

    Args:
        name: Filename or path as returned by the listing.

    Returns:
        The name with undecodable bytes replaced.
    """
    try:
        raw = name.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # Surrogates outside the escape range
        return name.encode("utf-8", "replace").decode("utf-8")
    return raw.decode("utf-8", "replace")
