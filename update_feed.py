import argparse
import logging
import sys
from pathlib import Path

from winefeed.logger import setup_logger
from winefeed.pipelines.feed import FeedPipeline
from winefeed.settings import ConfigError, load_config


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export the Square catalog and inventory as a Wine-Searcher feed file."
    )
    parser.add_argument("--output", type=Path, help="Feed file to write (default: FEED_OUTPUT_FILE)")
    parser.add_argument("--location-id", help="Square location to read stock from (default: SQUARE_LOCATION_ID)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run_process(argv=None) -> int:
    """Main orchestration function. Returns the process exit code."""
    args = parse_args(argv)

    # Credentials are checked before anything touches the disk or the network.
    try:
        config = load_config(
            output_file=args.output,
            location_id=args.location_id,
            log_level="DEBUG" if args.verbose else None,
        )
    except ConfigError as e:
        setup_logger().error(f"❌ {e}")
        return 1

    logger = setup_logger(
        log_level=getattr(logging, config.log_level.upper(), logging.INFO),
        log_dir=config.log_dir,
    )

    logger.info("--- Starting Wine-Searcher Feed Export ---")
    try:
        rows = FeedPipeline(config).run()
    except Exception as e:
        logger.exception(f"❌ Feed export failed: {e}")
        return 1

    logger.info(f"Wrote {config.output_file} with {rows} rows.")
    logger.info("\n--- Process Finished Successfully ---")
    return 0


def main():
    sys.exit(run_process())


if __name__ == "__main__":
    main()
