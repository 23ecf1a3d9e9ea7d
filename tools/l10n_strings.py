from l10n_console import trace

DOUBLE_QUOTE = '"'

def extract_identifier(line):
    """Text between the leading quote and the next one, or None when unterminated."""
    end = line.find(DOUBLE_QUOTE, 1)
    if end == -1:
        return None
    return line[1:end]

def parse_identifiers(content, origin=None):
    identifiers = []
    for line in content.split("\n"):
        # Comments, blank lines and continuations never start with a quote
        if not line.startswith(DOUBLE_QUOTE):
            continue
        line = line.strip(" \t")
        identifier = extract_identifier(line)
        if identifier is None:
            where = f" in {origin}" if origin else ""
            trace(f'Cannot extract id for line "{line}"{where}')
            continue
        identifiers.append(identifier)
    return identifiers
