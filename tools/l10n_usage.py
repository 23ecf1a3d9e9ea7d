import re

import l10n_settings

class UsagePatternError(ValueError):
    """The usage pattern could not be compiled; no usage set can be trusted."""

def build_usage_pattern(namespace=None):
    namespace = namespace or l10n_settings.NAMESPACE
    # 1. Generated accessors:   L10n.home.title
    # 2. Storyboard literals:   "@greeting_banner"
    source = rf'({re.escape(namespace)}\.[a-zA-Z0-9.]+)|("@[^"\n]*")'
    try:
        return re.compile(source)
    except re.error as e:
        raise UsagePatternError(f"invalid usage pattern {source!r}: {e}") from e

def extract_usages(source_text, pattern=None):
    """Return every lowercased accessor or quoted literal found in `source_text`."""
    pattern = pattern or build_usage_pattern()
    return frozenset(m.group(0).lower() for m in pattern.finditer(source_text))
