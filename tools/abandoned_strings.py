#!/usr/bin/env python3
import os
import sys
import argparse

import l10n_settings
from l10n_console import error, warn
from l10n_keys import to_l10n_generated
from l10n_usage import UsagePatternError
from l10n_scanner import find_abandoned_identifiers
from l10n_files import FatalReadError

# Abandoned Strings
# Finds .strings entries that are never referenced from Swift / Objective-C source
# (or, optionally, from storyboards).

BANNER = "Searching for abandoned resource strings…"
NOTHING_FOUND = "No abandoned resource strings were detected."
FOUND = "Abandoned resource strings were detected:"
USAGE_HINT = "Please provide the root directory for source code files as a command line argument."

def parse_arguments(argv):
    parser = argparse.ArgumentParser(description="Find abandoned localization strings")
    parser.add_argument("directories", nargs="*", help="Root directories to search (append 'storyboard' to include storyboards, 'write' for write mode)")
    parser.add_argument("--storyboard", action="store_true", help="Also search .storyboard files for \"@key\" usages")
    parser.add_argument("--write", action="store_true", help="Write results back to the .strings files (not implemented)")
    args = parser.parse_intermixed_args(argv)

    directories = list(args.directories)
    with_storyboard = args.storyboard
    if directories and directories[-1] == l10n_settings.STORYBOARD_FLAG:
        directories.pop()
        with_storyboard = True

    write = args.write
    if l10n_settings.WRITE_FLAG in directories:
        directories.remove(l10n_settings.WRITE_FLAG)
        write = True

    return directories, with_storyboard, write

def display_report(report, namespace=None):
    for strings_file in sorted(report):
        print(strings_file)
        for identifier in sorted(report[strings_file]):
            print(f"  {identifier}  {to_l10n_generated(identifier, namespace)}")
        print("")

def table_cell(text):
    # Markdown table cells cannot contain a bare pipe
    return str(text).replace("|", "\\|")

def write_step_summary(report, namespace=None):
    # Generate GitHub Step Summary if running in CI
    summary_path = os.environ.get("GITHUB_STEP_SUMMARY")
    if not summary_path:
        return False
    total = sum(len(ids) for ids in report.values())
    with open(summary_path, "a") as f:
        f.write("### 🌍 Abandoned Strings Report\n\n")
        f.write(f"**Files:** `{len(report)}`  \n")
        f.write(f"**Abandoned:** `{total}`  \n\n")
        if report:
            f.write("| File | Identifier | Generated Key |\n")
            f.write("| :--- | :--- | :--- |\n")
            for strings_file in sorted(report):
                for identifier in sorted(report[strings_file]):
                    generated = to_l10n_generated(identifier, namespace)
                    f.write(f"| {table_cell(strings_file)} | `{table_cell(identifier)}` | `{table_cell(generated)}` |\n")
    return True

def main(argv=None):
    l10n_settings.load_env()
    directories, with_storyboard, write = parse_arguments(sys.argv[1:] if argv is None else argv)
    if not directories:
        print(USAGE_HINT)
        return 0

    namespace = l10n_settings.get_namespace()
    print(BANNER)
    try:
        report = find_abandoned_identifiers(
            directories,
            with_storyboard=with_storyboard,
            namespace=namespace,
            max_workers=l10n_settings.get_max_workers(),
        )
    except FatalReadError as e:
        error(f"cannot read file!!! {e.path}: {e.reason}")
        return 1
    except UsagePatternError as e:
        error(str(e))
        return 1

    if not report:
        print(NOTHING_FOUND)
    else:
        print(FOUND)
        display_report(report, namespace)
        if write:
            # Write-back is a no-op: .strings files are never modified.
            warn("Write mode is not implemented; no files were modified.")

    write_step_summary(report, namespace)
    return 0

if __name__ == "__main__":
    sys.exit(main())
