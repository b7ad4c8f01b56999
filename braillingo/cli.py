import argparse
import sys
import textwrap
from functools import partial
from pathlib import Path

from braillingo.encoder import (
    Language,
    convert_to_braille,
    describe_record,
    detect_language,
    to_braille_str,
    unrecognized,
)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="braillingo",
        description="Convert Korean, English or Japanese text to braille.",
        usage=textwrap.dedent(
            """
            Convert text to braille, writing to the terminal or to a file.
            If no text is given, it's read from stdin.

              Examples:

                Convert some text and display it in the terminal:
                $ braillingo "Hello 안녕"

                # Convert a file and save the result:
                $ braillingo < input.txt -o output.txt

                # Show the dots used for each character:
                $ braillingo "こんにちは" --dots

                # Only print which language the text is in:
                $ braillingo "안녕하세요" --detect
            """.strip()
        ),
        add_help=True,
    )
    parser.add_argument(
        "text",
        type=str,
        nargs="?",
        default=None,
        help="The text to convert. Read from stdin if not given.",
    )
    parser.add_argument(
        "-l",
        "--language",
        type=str,
        choices=[lang.value for lang in Language if lang is not Language.MIXED],
        default=None,
        help="Language of the text. Characters are always matched by their own script.",
    )
    parser.add_argument(
        "-d",
        "--dots",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Print the dots of each character, one per line, instead of braille text",
    )
    parser.add_argument(
        "-D",
        "--detect",
        action="store_true",
        default=False,
        help="Only print the detected language of the text",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output text file. If not specified, output will be written to stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Output logs verbosely",
    )

    args = parser.parse_args(argv)
    log = partial(print, file=sys.stderr) if args.verbose else lambda message: None

    if args.text is None:
        log("Reading text from stdin")
        text = sys.stdin.read()
    else:
        text = args.text

    detected = detect_language(text)
    log(f"Detected language: {detected.value}")

    if args.detect:
        result_text = detected.value + "\n"
    else:
        records = convert_to_braille(text, args.language)
        log(f"Converted {len(records)} characters")
        if missing := unrecognized(records):
            chars = "".join(sorted({record.character for record in missing}))
            log(f"{len(missing)} characters have no braille mapping: {chars!r}")

        if args.dots:
            result_text = "".join(f"{describe_record(record)}\n" for record in records)
        else:
            result_text = to_braille_str(records)
            if not result_text.endswith("\n"):
                result_text += "\n"

    if (output_file := args.output) is not None:
        log(f"Writing output to {output_file}")
        with output_file.open("w", encoding="utf-8") as f:
            f.write(result_text)
        log(f"Output written to {output_file}")
    else:
        sys.stdout.write(result_text)


if __name__ == "__main__":
    main()
