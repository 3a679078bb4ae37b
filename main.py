#!/usr/bin/env python3
"""
HWiNFO Graph - Main Entry Point

Plots CPU/GPU usage and temperatures from a HWiNFO sensor log (CSV export),
with an adjustable sampling granularity.

Usage:
    python main.py                          # Start empty, pick a file from the window
    python main.py log.csv                  # Open a CSV on start
    python main.py log.csv --granularity 10 # ...and keep every 10th row
"""
import sys
import logging
from PyQt5 import QtWidgets

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from config import GRANULARITY_STEP, MAX_GRANULARITY, Settings

settings = Settings.from_env()

# Configure logging before the UI modules create their loggers
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='[%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger("main")

from ui.main_window import MainWindow


def parse_args(argv):
    """
    Parse ``[csv_path] [--granularity N]``.

    Returns:
        (csv_path or None, granularity)
    """
    csv_path = None
    granularity = 0

    args = list(argv)
    while args:
        arg = args.pop(0)
        if arg in ("--granularity", "-g"):
            if not args:
                raise ValueError("--granularity needs a value")
            granularity = int(args.pop(0))
        elif arg.startswith("--granularity="):
            granularity = int(arg.split("=", 1)[1])
        elif arg.startswith("-"):
            raise ValueError(f"Unknown option '{arg}'")
        else:
            csv_path = arg

    if not 0 <= granularity <= MAX_GRANULARITY or granularity % GRANULARITY_STEP:
        raise ValueError(
            f"--granularity must be a multiple of {GRANULARITY_STEP} between 0 and {MAX_GRANULARITY}"
        )

    return csv_path, granularity


def main(csv_path=None, granularity: int = 0):
    """
    Entry point for the viewer.

    Args:
        csv_path: Optional CSV file to open on start
        granularity: Initial granularity (0-60)
    """
    logger.info("Starting HWiNFO Graph")
    app = QtWidgets.QApplication(sys.argv)

    window = MainWindow(settings=settings)
    window.set_granularity(granularity)
    if csv_path:
        window.open_csv(csv_path)

    window.show()

    result = app.exec_()
    logger.info("Shutting down")
    sys.exit(result)


if __name__ == "__main__":
    try:
        path, granularity = parse_args(sys.argv[1:])
    except ValueError as e:
        print(f"Error: {e}")
        print(__doc__)
        sys.exit(2)

    try:
        main(path, granularity)
    except Exception as e:
        print("\n" + "="*60)
        print("❌ FATAL ERROR:")
        print("="*60)
        print(f"Error type: {type(e).__name__}")
        print(f"Error message: {e}")
        import traceback
        print("\nFull traceback:")
        traceback.print_exc()
        print("="*60)
        sys.exit(1)
