from typing import List, Optional


def split_command_line(value: str,
                       delimiters: Optional[str] = None,
                       quotes: Optional[str] = None,
                       escape: Optional[str] = None) -> List[str]:
    """
    Splits the given command-line string into a list of tokens separated by any of the given
    delimiter characters (default whitespace). Text within matching quote characters (default
    double and single quotes) is kept together, even if it contains delimiters, and the quotes
    themselves are removed; an empty quoted string yields an empty token. The escape character
    (default backslash) causes the following character to be taken literally, both inside and
    outside of quotes. An unterminated quote extends to the end of the string; an escape at
    the very end of the string is kept as is.
    """
    if not isinstance(value, str):
        return []
    if not isinstance(delimiters, str):
        delimiters = " \t\n\r\f\v"
    if not isinstance(quotes, str):
        quotes = "\"'"
    if not isinstance(escape, str):
        escape = "\\"
    tokens = []
    token = [] ; in_token = False ; quote = None  # noqa
    index = 0 ; length = len(value)  # noqa
    while index < length:
        char = value[index]
        if escape and (char == escape):
            if index + 1 < length:
                index += 1
                token.append(value[index])
            else:
                token.append(char)
            in_token = True
        elif quote:
            if char == quote:
                quote = None
            else:
                token.append(char)
        elif char in quotes:
            quote = char
            in_token = True
        elif char in delimiters:
            if in_token:
                tokens.append("".join(token))
                token = [] ; in_token = False  # noqa
        else:
            token.append(char)
            in_token = True
        index += 1
    if in_token:
        tokens.append("".join(token))
    return tokens
