"""Extraction of inline ``{tag}`` markers from entry text."""


def split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping one trailing empty line and any ``\\r``.

    ``str.splitlines`` also breaks on form feeds, unicode line separators and
    the like, which would put tag boundaries where the log format has none.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def extract_tags(text: str) -> set[str]:
    """Return the distinct lower-cased ``{...}`` markers found in *text*.

    Scanning is per line. A second ``{`` before the open marker is closed
    abandons the rest of that line; a ``}`` with nothing open is ignored;
    an unterminated marker is dropped at end of line. ``{}`` is a tag.
    """
    tags = set()
    for line in split_lines(text):
        buf = []
        for ch in line:
            if ch == "{":
                if buf:
                    break
                buf.append(ch)
            elif ch == "}":
                if buf:
                    buf.append(ch)
                    tags.add("".join(buf).lower())
                    buf = []
            elif buf:
                buf.append(ch)
    return tags
