"""Tokenizer for raw command lines."""

from typing import List, Tuple

QUOTE = '"'


def parse_input(line: str) -> Tuple[str, List[str]]:
    """Split a raw input line into a command name and its arguments.

    The line is split on double quotes into alternating unquoted (even index)
    and quoted (odd index) segments. Unquoted segments are split on single
    spaces with empty pieces dropped; the first such piece is the command and
    the rest are arguments. Quoted segments are always arguments and are kept
    verbatim, spaces included. An unmatched quote runs to the end of the line.

    Args:
        line: Raw input line

    Returns:
        Tuple of (command, arguments); command is "" if none was found
    """
    command = ""
    args: List[str] = []

    for index, segment in enumerate(line.strip().split(QUOTE)):
        if index % 2 == 1:
            args.append(segment)
            continue

        for piece in segment.split(" "):
            piece = piece.strip()
            if not piece:
                continue
            if command:
                args.append(piece)
            else:
                command = piece

    return command, args
