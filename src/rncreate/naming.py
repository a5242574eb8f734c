"""Name helpers shared by the template builders and the creation flow."""

from typing import Optional


def capitalize_first_letter(value: Optional[str]) -> str:
    """Upper-case the first character, leave the rest untouched.

    Used for exported symbol names (``sampleName`` -> ``SampleName``).
    """
    if not value:
        return ""
    return value[0].upper() + value[1:]


def lowercase_first_letter(value: Optional[str]) -> str:
    """Lower-case the first character, leave the rest untouched.

    Used for directory and file names (``SampleName`` -> ``sampleName``).
    """
    if not value:
        return ""
    return value[0].lower() + value[1:]
