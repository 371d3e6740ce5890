"""Sheet number extraction for grouping drawing revisions."""

import re

# 1-3 letters, a digit, any run of digits/dots/hyphens, optional trailing letter.
# The digit run never gives characters back, so the trailing letter only counts
# when it ends the prefix: "A101Rev2" keys as "a101", never "a10".
SHEET_PATTERN = re.compile(r"^[A-Za-z]{1,3}\d(?=([\d.\-]*))\1(?:[A-Za-z](?![A-Za-z]))?")


def split_stem(filename: str) -> str:
    """Return the filename without its extension.

    The extension is the text after the last dot, unless that dot is the
    first character (``.hidden`` has no extension).
    """
    dot_index = filename.rfind(".")
    if dot_index > 0:
        return filename[:dot_index]
    return filename


def sheet_id(filename: str) -> str:
    """Derive the grouping key shared by all revisions of one sheet.

    Examples:
        ``A101.pdf`` -> ``a101``
        ``a101-Rev2.PDF`` -> ``a101``
        ``A101.1.pdf`` -> ``a101.1``
        ``A101B.pdf`` -> ``a101b``
        ``A101Rev2.pdf`` -> ``a101``
        ``readme.txt`` -> ``readme``

    Names without a leading sheet-like prefix fall back to the lowercased
    stem, so only exact stem matches group together.

    Args:
        filename: Base filename including extension.

    Returns:
        Lowercased sheet key. Never raises.
    """
    stem = split_stem(filename)
    match = SHEET_PATTERN.match(stem)
    if match:
        # "A101-Rev2" matches "A101-"; a dangling separator is not part of the key.
        return match.group(0).rstrip(".-").lower()
    return stem.lower()
