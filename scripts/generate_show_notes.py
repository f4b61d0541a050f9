"""Generate show notes for a transcript file from the command line."""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import settings  # noqa: E402
from src.generation.errors import ShowNotesError  # noqa: E402
from src.generation.pipeline import ShowNotesPipeline  # noqa: E402
from src.pipeline_config import PipelineConfig  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate podcast show notes from a transcript")
    parser.add_argument("transcript", type=Path, help="Path to a .txt or .srt transcript")
    parser.add_argument("-o", "--output", type=Path, help="Write show notes here instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.transcript.exists():
        print(f"Transcript not found: {args.transcript}", file=sys.stderr)
        return 1

    content = args.transcript.read_text(encoding="utf-8-sig")
    pipeline = ShowNotesPipeline(PipelineConfig.from_settings(settings))

    try:
        notes = pipeline.generate_show_notes(content)
    except ShowNotesError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    if args.output:
        args.output.write_text(notes + "\n", encoding="utf-8")
        print(f"Show notes saved: {args.output}")
    else:
        print(notes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
