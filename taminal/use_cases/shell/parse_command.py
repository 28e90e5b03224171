from typing import Optional

from taminal.entities.Command import ParsedCommand


def parse_command(raw_line: str) -> Optional[ParsedCommand]:
    """
    Tokenize one input line on runs of whitespace.

    Quotes, escapes, pipes and redirections have no special meaning.

    Returns:
        The ParsedCommand, or None when the line is blank
    """
    tokens = raw_line.split()
    if not tokens:
        return None
    return ParsedCommand(name=tokens[0], args=tuple(tokens[1:]))
