# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

from tests.test_support import TEST_IDENTIFIER, build_cli_env


class TestEndToEndCli(unittest.TestCase):
    def test_encode_decode_roundtrip_through_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp_path = Path(tmpdir)
            blob_path = tmp_path / "key.bin"
            blob = bytes(range(37))
            blob_path.write_bytes(blob)
            env = build_cli_env(overrides={"XDG_CONFIG_HOME": str(tmp_path / "xdg")})

            encoded = subprocess.run(
                [
                    sys.executable,
                    "-m",
                    "textid.cli",
                    "encode",
                    "--file",
                    str(blob_path),
                    "--line-length",
                    "20",
                ],
                check=True,
                capture_output=True,
                text=True,
                env=env,
            )
            text_path = tmp_path / "key.txt"
            text_path.write_text(encoded.stdout, encoding="utf-8")
            self.assertGreater(len(encoded.stdout.splitlines()), 1)

            output_path = tmp_path / "restored.bin"
            subprocess.run(
                [
                    sys.executable,
                    "-m",
                    "textid.cli",
                    "--quiet",
                    "decode",
                    "--file",
                    str(text_path),
                    "--output",
                    str(output_path),
                ],
                check=True,
                capture_output=True,
                env=env,
            )
            self.assertEqual(output_path.read_bytes(), blob)

    def test_decode_failure_exit_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            env = build_cli_env(overrides={"XDG_CONFIG_HOME": tmpdir})
            result = subprocess.run(
                [sys.executable, "-m", "textid.cli", "decode", TEST_IDENTIFIER[:-3] + "qq"],
                capture_output=True,
                text=True,
                env=env,
            )
        self.assertEqual(result.returncode, 2)
        self.assertIn("checksum mismatch", result.stderr)


if __name__ == "__main__":
    unittest.main()
