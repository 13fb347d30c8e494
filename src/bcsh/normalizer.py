"""Strip comments and surrounding whitespace from raw input lines."""

COMMENT = "#"
ESCAPE = "\\"
WHITESPACE = " \t\r\n"


def strip_comment(line: str) -> str:
    """Cut the line at the first unescaped '#'.

    An escaped '\\#' stays in the line as a plain '#'.
    """
    result: list[str] = []
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == ESCAPE and i + 1 < len(line) and line[i + 1] == COMMENT:
            result.append(COMMENT)
            i += 2
            continue
        if ch == COMMENT:
            break
        result.append(ch)
        i += 1
    return "".join(result)


def trim(line: str) -> str:
    start = 0
    end = len(line) - 1
    while start <= end and line[start] in WHITESPACE:
        start += 1
    while end >= start and line[end] in WHITESPACE:
        end -= 1
    return line[start : end + 1]


def normalize(raw: str) -> str | None:
    """Return the command text of a raw line, or None if there is nothing to run.

    Blank lines and comment-only lines both yield None.
    """
    line = trim(strip_comment(raw))
    if not line:
        return None
    return line
