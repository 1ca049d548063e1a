import ntpath

DEFAULT_SEP: str = ntpath.sep
DEFAULT_ALTSEP: str = ntpath.altsep


def validate_separators(sep: str, altsep: str) -> None:
    for label, value in (("sep", sep), ("altsep", altsep)):
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"Invalid {label} value: {value!r}. Expected a single character.")
    if sep == altsep:
        raise ValueError(f"sep and altsep must differ, both are {sep!r}.")


def split_segments(
    path: str, sep: str = DEFAULT_SEP, altsep: str = DEFAULT_ALTSEP
) -> list[str]:
    """Split *path* on either separator, keeping empty segments.

    ``"\\a\\b"`` becomes ``["", "a", "b"]``: a leading separator shows up
    as an empty first segment and is left for the caller to interpret.
    """
    return path.replace(altsep, sep).split(sep)


def join_segments(segments: list[str], sep: str = DEFAULT_SEP) -> str:
    return sep.join(segments)
