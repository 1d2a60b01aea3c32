"""
Text normalization used before comparing file contents with the reference license texts.

License texts get wrapped into comment blocks, re-indented, reflowed and re-cased,
so only letters and digits are kept, lowercased, in their original order.
"""


def normalize(text: str) -> str:
    """
    Reduces a text to its lowercase letters and decimal digits.

    Args:
        text (str): Any text, possibly empty.

    Returns:
        str: The letters and digits of `text`, lowercased and concatenated.
    """
    if not text:
        return ""
    # lowercase char by char, whole-string lower() depends on context (final sigma)
    return "".join(c for ch in text for c in ch.lower() if c.isalpha() or c.isdecimal())
