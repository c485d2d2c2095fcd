# scripts/smoke.py
"""
Smoke Test Script for the plainsettings loader.

Usage
-----
1. Load a built-in sample file into default engine settings:
    $ uv run python scripts/smoke.py

2. Load a local settings file (warnings only, never aborts):
    $ uv run python scripts/smoke.py --file settings.txt --advisory
"""

import argparse
import logging
import sys
import tempfile
from pathlib import Path

from dotenv import load_dotenv

from plainsettings import EngineSettings, MissingSettingPolicy, SettingsError, engine_registry
from plainsettings.loader import SettingsLoader

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
DEFAULT_TEXT = """\
// You can add comment lines like this to settings.txt,
//  but only if the line *starts with* two forward slashes.
// integer values:
ScreenWidth = 1024
ScreenHeight = 768
// boolean values:
FullScreen = true
// string values (no quotes needed):
SettingsFileName = settings.txt
"""


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run plainsettings Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Path to a settings file")
    parser.add_argument(
        "--advisory", action="store_true", help="Log problems instead of aborting"
    )
    args = parser.parse_args()

    with tempfile.TemporaryDirectory() as tmp:
        if args.file:
            source = Path(args.file)
        else:
            source = Path(tmp) / "settings.txt"
            source.write_text(DEFAULT_TEXT, encoding="utf-8")

        settings = EngineSettings()
        policy = MissingSettingPolicy.ADVISORY if args.advisory else MissingSettingPolicy.FATAL
        loader = SettingsLoader(engine_registry(settings), source, policy=policy, trace=True)

        print(f"🚀 Loading {source}...")
        try:
            report = loader.load()
        except SettingsError as e:
            print(f"❌ Load aborted: {e}")
            sys.exit(1)

    print(f"✅ Bound {len(report.bound)} setting(s), {len(report.diagnostics)} problem(s).")
    for name, value in settings.model_dump().items():
        print(f"  {name:<36} {value!r}")


if __name__ == "__main__":
    main()
