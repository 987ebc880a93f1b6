#!/usr/bin/env python3
"""Basic usage example"""

from leveled_logger import LoggerBuilder, LogLevel


def report(logger, message):
    # reported location is the caller of report(), not this line
    logger.warn_depth(1, message)


def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_level(LogLevel.DEBUG)
        .with_info_log_file("logs/example.log")
        .with_error_log_file("logs/example.err.log")
        .build())

    # Log messages
    logger.debug("This is debug")
    logger.info("Application started")
    logger.infof("Loaded %d plugins in %.1fms", 3, 12.5)
    logger.warnln("Disk usage at", 91, "percent")
    report(logger, "Reported from main()")
    logger.error("This is error")

    # Release log files
    logger.close()


if __name__ == "__main__":
    main()
