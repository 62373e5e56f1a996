"""Entry point functions for the potgen command line tool."""

import os
import sys
import logging

# Add the parent directory to the sys path so that modules can be found
base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(base_path)


def potgen() -> int:
    """Entry point for potgen command."""
    from scripts.potgen_common import InitLogger, CreateArgParser, CreateOptions, CreateGenerator, GetOutputPath
    from PyPotGen.PotError import PotError

    parser = CreateArgParser("Extracts translatable strings from PHP sources into a gettext template")
    args = parser.parse_args()

    InitLogger("potgen", args.debug)

    try:
        options = CreateOptions(args)
        generator = CreateGenerator(options, args)
        destination = generator.Generate(args.source, GetOutputPath(options, args))
        logging.info(f"Extracted {len(generator.catalog)} messages to {destination}")
        return 0

    except PotError as e:
        logging.error(str(e))
        print("Error:", e)
        return 1


def main():
    sys.exit(potgen())


if __name__ == "__main__":
    main()
