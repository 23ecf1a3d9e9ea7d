from concurrent.futures import ThreadPoolExecutor, as_completed

import l10n_settings
from l10n_console import trace
from l10n_keys import is_used
from l10n_usage import build_usage_pattern, extract_usages
from l10n_files import concatenate_source, find_files, read_text_file
from l10n_strings import parse_identifiers

def find_abandoned_in_content(content, usage_set, namespace=None, origin=None):
    return [
        identifier
        for identifier in parse_identifiers(content, origin=origin)
        if not is_used(identifier, usage_set, namespace)
    ]

def scan_strings_file(strings_file, usage_set, namespace=None):
    """Worker for a single .strings file. Returns (path, identifiers) or None."""
    content = read_text_file(strings_file)
    abandoned = find_abandoned_in_content(content, usage_set, namespace, origin=strings_file)
    if not abandoned:
        trace(f"{strings_file} has no abandoned identifiers")
        return None
    return strings_file, abandoned

def scan(strings_files, usage_set, namespace=None, max_workers=None):
    """Scan every strings file concurrently and merge the findings.

    `usage_set` must be complete before this is called; workers only read it.
    Results are merged here, on the calling thread, as futures complete, so the
    report has a single writer. A FatalReadError from any worker propagates.
    """
    report = {}
    if not strings_files:
        return report
    with ThreadPoolExecutor(max_workers=max_workers) as exe:
        futures = {exe.submit(scan_strings_file, f, usage_set, namespace): f for f in strings_files}
        for fut in as_completed(futures):
            result = fut.result()
            if result is None:
                continue
            path, abandoned = result
            report[path] = abandoned
    return report

def find_abandoned_identifiers(root_directories, with_storyboard=False, namespace=None, max_workers=None):
    namespace = namespace or l10n_settings.NAMESPACE

    # 1. Usage set (finished before any worker starts)
    pattern = build_usage_pattern(namespace)
    source_code = concatenate_source(root_directories, with_storyboard=with_storyboard)
    usage_set = extract_usages(source_code, pattern)

    # 2. Resource files
    strings_files = find_files(root_directories, [l10n_settings.STRINGS_EXTENSION])

    # 3. Match
    return scan(strings_files, usage_set, namespace=namespace, max_workers=max_workers)
