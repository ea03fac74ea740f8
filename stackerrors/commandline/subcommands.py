import sys
from argparse import Namespace

import stackerrors
from stackerrors import settings
from stackerrors.logging import logger


def parse(args: Namespace):
    logger.set_verbose(args.verbose)

    if args.config is not None:
        try:
            settings.setup().load_file(args.config)
        except (OSError, stackerrors.StackErrorsError) as e:
            logger.error(f"Failed to load settings from '{args.config}'", e)
            logger.fatal("Invalid settings")
    settings.commit()

    if args.file is not None:
        with open(args.file, mode="r", encoding="utf-8") as file:
            text = file.read()
    else:
        logger.info("Reading from standard input. Ctrl-D to finish writing.")
        text = sys.stdin.read()

    try:
        err = stackerrors.parse_panic(text)
    except stackerrors.PanicParseError as e:
        logger.error("Failed to parse panic output", e)
        logger.fatal("No trace to show")

    if args.trace_only:
        print(stackerrors.trace(err), end="")
    else:
        print(stackerrors.full_trace(err), end="")
