import unittest
from unittest.mock import patch
import codecs
import os
import sys
import tempfile
import shutil

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
import l10n_files

class TestL10nFiles(unittest.TestCase):

    def setUp(self):
        self.root = tempfile.mkdtemp()
        for rel in ["A.swift", "B.M", "c.h", "notes.txt", "Sub/D.swift", "Sub/Main.storyboard",
                    "Sub/en.lproj/Localizable.strings", ".git/hooks/pre.swift"]:
            path = os.path.join(self.root, rel)
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "w") as f:
                f.write(f"// {rel}\n")

    def tearDown(self):
        shutil.rmtree(self.root, ignore_errors=True)

    def rel(self, files):
        return sorted(os.path.relpath(f, self.root).replace(os.sep, "/") for f in files)

    def test_find_files_by_extension(self):
        files = l10n_files.find_files([self.root], ["h", "m", "swift"])
        self.assertEqual(self.rel(files), ["A.swift", "B.M", "Sub/D.swift", "c.h"])

    def test_find_files_skips_git(self):
        files = l10n_files.find_files([self.root], ["swift"])
        self.assertNotIn(".git/hooks/pre.swift", self.rel(files))

    def test_find_files_paths_are_rooted(self):
        files = l10n_files.find_files([self.root], ["strings"])
        self.assertEqual(files, [os.path.join(self.root, "Sub", "en.lproj", "Localizable.strings")])

    @patch("l10n_files.trace")
    def test_missing_directory_is_traced_and_skipped(self, mock_trace):
        missing = os.path.join(self.root, "nope")
        files = l10n_files.find_files([missing, self.root], ["strings"])
        self.assertEqual(len(files), 1)
        mock_trace.assert_called_once_with(f"Failed to create enumerator for directory: {missing}")

    def test_concatenate_source_with_and_without_storyboard(self):
        plain = l10n_files.concatenate_source([self.root])
        self.assertIn("// Sub/D.swift", plain)
        self.assertNotIn("Main.storyboard", plain)
        with_storyboard = l10n_files.concatenate_source([self.root], with_storyboard=True)
        self.assertIn("// Sub/Main.storyboard", with_storyboard)

    def test_decode_text(self):
        self.assertEqual(l10n_files.decode_text("héllo".encode("utf-8")), "héllo")
        self.assertEqual(l10n_files.decode_text(codecs.BOM_UTF8 + b"x"), "x")
        self.assertEqual(l10n_files.decode_text("héllo".encode("utf-16")), "héllo")
        self.assertEqual(l10n_files.decode_text(codecs.BOM_UTF16_BE + "ok".encode("utf-16-be")), "ok")

    def test_decode_text_utf32(self):
        self.assertEqual(l10n_files.decode_text("héllo".encode("utf-32")), "héllo")
        self.assertEqual(l10n_files.decode_text(codecs.BOM_UTF32_LE + "ok".encode("utf-32-le")), "ok")
        self.assertEqual(l10n_files.decode_text(codecs.BOM_UTF32_BE + "ok".encode("utf-32-be")), "ok")

    def test_read_missing_file_raises_fatal(self):
        missing = os.path.join(self.root, "missing.strings")
        with self.assertRaises(l10n_files.FatalReadError) as ctx:
            l10n_files.read_text_file(missing)
        self.assertEqual(ctx.exception.path, missing)
        self.assertIsInstance(ctx.exception, OSError)

if __name__ == "__main__":
    unittest.main()
