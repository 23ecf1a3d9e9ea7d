import os
import codecs
from pathlib import Path

import l10n_settings
from l10n_console import trace

class FatalReadError(OSError):
    """A source or resource file could not be opened or decoded."""

    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = str(path)
        self.reason = str(reason)

def find_files(directories, extensions):
    """Recursively collect files under each root whose extension is in `extensions`."""
    wanted = {e.lower().lstrip(".") for e in extensions}
    files = []
    for directory in directories:
        if not os.path.isdir(directory):
            trace(f"Failed to create enumerator for directory: {directory}")
            continue
        for root, dirs, names in os.walk(directory):
            dirs[:] = sorted(d for d in dirs if d not in l10n_settings.EXCLUDED_DIRS)
            for name in sorted(names):
                if Path(name).suffix.lower().lstrip(".") in wanted:
                    files.append(os.path.join(root, name))
    return files

def decode_text(data):
    # UTF-32 BOMs share a prefix with UTF-16 ones, so test them first
    if data.startswith(codecs.BOM_UTF32_LE) or data.startswith(codecs.BOM_UTF32_BE):
        return data.decode("utf-32")
    # .strings files are frequently saved as UTF-16 by Xcode
    if data.startswith(codecs.BOM_UTF16_LE) or data.startswith(codecs.BOM_UTF16_BE):
        return data.decode("utf-16")
    if data.startswith(codecs.BOM_UTF8):
        return data.decode("utf-8-sig")
    return data.decode("utf-8")

def read_text_file(path):
    try:
        with open(path, "rb") as f:
            data = f.read()
        return decode_text(data)
    except (OSError, UnicodeDecodeError) as e:
        raise FatalReadError(path, e) from e

def concatenate_source(directories, with_storyboard=False):
    extensions = list(l10n_settings.SOURCE_EXTENSIONS)
    if with_storyboard:
        extensions.append(l10n_settings.STORYBOARD_EXTENSION)
    return "\n".join(read_text_file(f) for f in find_files(directories, extensions))
