# src/mdtree/parsers/inline.py

from .models import TextSpan, TextStyle

BOLD_MARKERS = ("**", "__")
ITALIC_MARKERS = ("*", "_")


def parse_inline(text: str) -> list[TextSpan]:
    """
    Split one line of text into styled spans.

    - ``**``/``__`` toggle bold, ``*``/``_`` toggle italic
    - two-character markers win over one-character ones
    - both delimiter families share the same flags
    - unbalanced markers style the rest of the line; nothing is an error
    """
    spans: list[TextSpan] = []
    buffer: list[str] = []
    bold = False
    italic = False

    def flush() -> None:
        if buffer:
            style = TextStyle.from_flags(bold=bold, italic=italic)
            spans.append(TextSpan(text="".join(buffer), style=style))
            buffer.clear()

    i = 0
    while i < len(text):
        if text.startswith(BOLD_MARKERS, i):
            flush()
            bold = not bold
            i += 2
        elif text.startswith(ITALIC_MARKERS, i):
            flush()
            italic = not italic
            i += 1
        else:
            buffer.append(text[i])
            i += 1

    flush()
    return spans
