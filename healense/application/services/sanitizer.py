"""Plain-text enforcement for streamed model output."""
import re

_FENCE = "```"
# Trailing characters of a chunk that may be the first half of a marker
_HELD_BACK_CHARS = "`*#"

_HEADING_RE = re.compile(r"\n[ \t]*#{1,6}[ \t]+")
_STRONG_RE = re.compile(r"\*\*|__")
_EMPHASIS_OPEN_RE = re.compile(r"(?<!\w)\*(?=\S)")
_EMPHASIS_CLOSE_RE = re.compile(r"(?<=\S)\*(?!\w)")
_UNDERSCORE_EMPHASIS_RE = re.compile(r"(?<!\w)_([^_\s][^_]*?)_(?!\w)")
_WHITESPACE_RE = re.compile(r"\s+")


def _strip_inline(text: str) -> str:
    text = text.replace("`", "")
    # Headings: "# Title" -> "Title"
    text = _HEADING_RE.sub("\n", text)
    # Bold / italic markers: **text**, __text__, *text*, _text_ -> text
    text = _STRONG_RE.sub("", text)
    text = _EMPHASIS_OPEN_RE.sub("", text)
    text = _EMPHASIS_CLOSE_RE.sub("", text)
    text = _UNDERSCORE_EMPHASIS_RE.sub(r"\1", text)
    return _WHITESPACE_RE.sub(" ", text)


def _context_char(last: str) -> str:
    if last.isspace():
        return " "
    if last.isalnum() or last == "_":
        return "a"
    return "."


class MarkdownStripper:
    """
    Strips markdown from one model reply that arrives in arbitrary chunks.

    Fenced code blocks are dropped with their content, also when the fences
    and the code arrive in different chunks; an unterminated block swallows
    the rest of the reply. Backticks, heading markers and bold/italic markers
    are removed, and every whitespace run, newlines included, reaches the
    client as a single space even when it spans chunks. An asterisk that is
    not attached to a word ("2 * 3") is kept.

    Marker characters at the end of a chunk are held back until the next
    chunk shows what they start; flush() releases them at the end of the
    reply.
    """

    def __init__(self) -> None:
        self.in_fence = False
        self._pending = ""
        # Stand-in for the last character the client has seen; "\n" at the
        # start of a line, which is also where a reply starts
        self._context = "\n"

    def feed(self, chunk: str) -> str:
        """Sanitize the next chunk; may return an empty string"""
        if not chunk:
            return ""
        text = self._pending + chunk
        held = len(text) - len(text.rstrip(_HELD_BACK_CHARS))
        if held:
            self._pending = text[-held:]
            text = text[:-held]
        else:
            self._pending = ""
        return self._strip(text)

    def flush(self) -> str:
        """Sanitize whatever is still held back at the end of the reply"""
        text, self._pending = self._pending, ""
        return self._strip(text)

    def _strip(self, text: str) -> str:
        if not text:
            return ""
        visible = self._drop_fenced(text)
        if not visible:
            return ""

        # The context character lets lookbehinds and whitespace collapsing
        # see across the chunk boundary; it is never part of the output
        cleaned = _strip_inline(self._context + visible)[1:]

        if visible.rstrip(" \t").endswith("\n"):
            self._context = "\n"
        elif cleaned:
            self._context = _context_char(cleaned[-1])
        return cleaned

    def _drop_fenced(self, text: str) -> str:
        """Remove fenced blocks, continuing a block opened by an earlier chunk"""
        visible = []
        pos = 0
        while True:
            index = text.find(_FENCE, pos)
            if index == -1:
                if not self.in_fence:
                    visible.append(text[pos:])
                break
            if not self.in_fence:
                visible.append(text[pos:index])
                # The block separates the words around it
                visible.append(" ")
            self.in_fence = not self.in_fence
            pos = index + len(_FENCE)
        return "".join(visible)
