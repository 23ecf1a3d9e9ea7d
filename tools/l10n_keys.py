import l10n_settings

# Maps a .strings key to the accessor SwiftGen generates for it:
#   "home.title"            -> l10n.home.title
#   "settings.push_enabled" -> l10n.settings.pushenabled
# SwiftGen's acronym handling is not reproduced, so only the lowercased form is compared.

def camel_case(segment, cap):
    words = segment.lower().split("_")
    return "".join(
        word.capitalize() if (index > 0 or cap) else word
        for index, word in enumerate(words)
    )

def to_l10n_generated(identifier, namespace=None):
    namespace = namespace or l10n_settings.NAMESPACE
    segments = identifier.split(".")
    generated = ".".join(
        camel_case(segment, cap=(index != 0 or len(segments) == 1))
        for index, segment in enumerate(segments)
    )
    return f"{namespace}.{generated}".lower()

def quoted_form(identifier):
    """Form used by storyboards, e.g. text="@greeting_banner"."""
    return f'"@{identifier}"'

def usage_keys(identifier, namespace=None):
    return to_l10n_generated(identifier, namespace), quoted_form(identifier).lower()

def is_used(identifier, usage_set, namespace=None):
    return any(key in usage_set for key in usage_keys(identifier, namespace))
