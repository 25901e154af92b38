"""Base name extraction for license file matching."""
import os


def extract_basename(filename: str) -> str:
    """Strip the directory part and the final extension from a filename.

    A leading dot does not start an extension (".license" stays
    ".license") and trailing separators are ignored, so "docs/LICENSE/"
    yields "LICENSE".

    Args:
        filename: Filename as it appears in a directory listing.

    Returns:
        The base name without its extension.
    """
    name = os.path.basename(filename.rstrip("/" + os.sep))
    root, _ext = os.path.splitext(name)
    return root


def comparison_key(filename: str) -> str:
    """Return the upper-cased base name that precedence rules are tested against."""
    return extract_basename(filename).upper()
