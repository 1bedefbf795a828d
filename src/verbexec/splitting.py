"""Quote-aware whitespace splitting of command patterns."""

QUOTE = '"'
SHELL_QUOTES = ("'", '"')
ESCAPED_QUOTE = "\"'\""


def _skip_shell_run(text: str, idx: int) -> int | None:
    """Return the index after an escaped run starting at idx, if there's one.

    Handles the runs produced by shell escaping: `'...'` and the `"'"`
    standing for a single quote between two of them.
    """
    if text.startswith(ESCAPED_QUOTE, idx):
        return idx + len(ESCAPED_QUOTE)
    if text[idx] == "'":
        closing = text.find("'", idx + 1)
        if closing != -1:
            return closing + 1
    return None


def _closes_quote(text: str, idx: int) -> bool:
    """Return whether the double quote at idx ends a quoted part."""
    return text[idx] == QUOTE and (idx + 1 == len(text) or text[idx + 1].isspace())


def split_unquoted_whitespace(
    text: str,
    unwrap_quotes: bool = False,
    keep_quoted_runs: bool = False,
) -> list[str]:
    """Split text on whitespace which isn't inside a quoted part.

    A double quote starting a token opens a quoted part, closed by a double
    quote followed by whitespace or by the end of the text. Double quotes
    elsewhere are ordinary characters. When unwrap_quotes is set, the
    enclosing quotes of a closed quoted token are removed.

    With keep_quoted_runs, quoted runs produced by shell escaping (such as
    ``'a b'`` or ``'it'"'"'s'``) are kept whole, quotes included, both inside
    a token and inside a double-quoted part.
    """
    tokens: list[str] = []
    n = len(text)
    i = 0
    while i < n:
        if text[i].isspace():
            i += 1
            continue
        start = i
        if text[i] == QUOTE:
            end = i + 1
            while end < n and not _closes_quote(text, end):
                if keep_quoted_runs:
                    skipped = _skip_shell_run(text, end)
                    if skipped is not None:
                        end = skipped
                        continue
                end += 1
            if end >= n:
                # unclosed: the rest of the text is one raw token
                tokens.append(text[start:])
                break
            token = text[start : end + 1]
            if unwrap_quotes:
                token = token[1:-1]
            tokens.append(token)
            i = end + 1
            continue
        while i < n and not text[i].isspace():
            if keep_quoted_runs and text[i] in SHELL_QUOTES:
                closing = text.find(text[i], i + 1)
                if closing != -1:
                    i = closing + 1
                    continue
            i += 1
        tokens.append(text[start:i])
    return tokens
