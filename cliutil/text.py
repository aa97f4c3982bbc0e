# cliutil/text.py
"""
Text helpers for console output: alignment/justification, indentation,
quote-aware splitting and loose string -> bool conversion.
"""
import enum
import re
import textwrap

from .utils import round_half_up

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")

# stands in for indentation spaces while wrapping so they are not collapsed
_INDENT_CHAR = "\0"


class TextAlign(enum.IntFlag):
    LEFT = 0x0000
    RIGHT = 0x0001
    CENTER = 0x0002
    JUSTIFY = 0x0004
    JUSTIFY_ALL_LINES = 0x0100  # justify last paragraph lines too


def wordwrap(text, width, newline="\n", cut_words=True):
    out = []
    for line in text.split(newline):
        wrapped = textwrap.wrap(line, width, break_long_words=cut_words, break_on_hyphens=False)
        out.extend(wrapped or [""])
    return newline.join(out)


def _pad_both(line, width):
    add = width - len(line)
    left = add // 2
    return " " * left + line + " " * (add - left)


def _justify_line(line, width):
    spaces_to_add = width - len(line)
    words = line.split(" ")
    if len(words) < 2 or spaces_to_add <= 0:
        return line
    per_gap = spaces_to_add / (len(words) - 1)
    pending = 0.0
    for i in range(len(words) - 1):
        pending += per_gap
        n = round_half_up(pending)
        if n > 0:
            words[i] += " " * n
            pending -= n
    return " ".join(words)


def text_align(text, align=TextAlign.LEFT, width=76, newline="\n", cut_words=True,
               paragraph_sep_lines=1, paragraph_indent=0):
    """
    Align text left, right, centered or justified within `width` columns.

    Runs of spaces are collapsed, paragraphs (split on `newline`) are separated
    by `paragraph_sep_lines` empty lines and the first line of each paragraph
    gets `paragraph_indent` spaces (LEFT and JUSTIFY).
    """
    text = re.sub(" +", " ", text).strip()
    mode = align & 0x0F
    paragraph_sep = newline * (paragraph_sep_lines + 1)
    indent = _INDENT_CHAR * max(paragraph_indent, 0)

    if mode == TextAlign.LEFT:
        if indent:
            text = indent + text.replace(newline, newline + indent)
        text = text.replace(newline, paragraph_sep)
        text = wordwrap(text, width, newline, cut_words)
        return text.replace(_INDENT_CHAR, " ")

    if mode in (TextAlign.RIGHT, TextAlign.CENTER):
        text = text.replace(newline, paragraph_sep)
        lines = wordwrap(text, width, newline, cut_words).split(newline)
        for i, line in enumerate(lines):
            if line and len(line) < width:
                lines[i] = line.rjust(width) if mode == TextAlign.RIGHT else _pad_both(line, width)
        return newline.join(lines)

    if mode == TextAlign.JUSTIFY:
        paragraphs = []
        for paragraph in text.split(newline):
            paragraph = indent + paragraph.strip()
            lines = wordwrap(paragraph, width, newline, cut_words).split(newline)
            last = len(lines) if align & TextAlign.JUSTIFY_ALL_LINES else len(lines) - 1
            for i in range(last):
                lines[i] = _justify_line(lines[i], width)
            paragraphs.append(newline.join(lines).replace(_INDENT_CHAR, " "))
        return paragraph_sep.join(paragraphs)

    raise ValueError(f"Unknown text alignment {align!r}")


def text_indent(text, indent, indentation, newline="\n"):
    """Add `indentation` copies of `indent` to each line, or remove up to -indentation copies."""
    if indentation == 0 or not indent:
        return text
    lines = text.split(newline)
    if indentation > 0:
        prefix = indent * indentation
        lines = [prefix + line for line in lines]
    else:
        for i, line in enumerate(lines):
            removed = 0
            while removed < -indentation and line.startswith(indent):
                line = line[len(indent):]
                removed += 1
            lines[i] = line
    return newline.join(lines)


def explode_string(text, delimiter=" "):
    """
    Split `text` on `delimiter`, ignoring delimiters inside '...' or "...".

    A word starting with a quote has that quote char trimmed from both ends:
        explode_string('a "b c" d') -> ['a', 'b c', 'd']
    """
    words = []
    in_single = in_double = False
    word = ""
    last = len(text) - 1
    for i, c in enumerate(text):
        split = False
        if c == "'":
            if not in_double:
                in_single = not in_single
        elif c == '"':
            if not in_single:
                in_double = not in_double
        elif c == delimiter and not (in_single or in_double):
            split = True
            c = ""
        word += c
        if split or i == last:
            if word and word[0] in "'\"":
                word = word.strip(word[0])
            words.append(word)
            word = ""
    return words


def str_to_bool(value):
    s = str(value).strip().lower()
    if s in ("y", "yes", "t", "true"):
        return True
    if s in ("n", "no", "f", "false"):
        return False
    if _NUMERIC_RE.match(s):
        return float(s) != 0
    return False
