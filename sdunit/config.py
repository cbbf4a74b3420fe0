import logging


def setup_logger(verbose: bool = False, journal: bool = False) -> None:
    """Configure the sdunit logger.

    Args:
        verbose: Log debug messages
        journal: Send records to the systemd journal instead of stderr
    """
    app_logger = logging.getLogger('sdunit')
    app_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if journal:
        # Requires the optional systemd-python dependency
        from systemd.journal import JournalHandler

        handler: logging.Handler = JournalHandler(SYSLOG_IDENTIFIER='sdunit')
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter('%(levelname)s %(name)s: %(message)s')
        )

    # Reconfiguring replaces the previous handler
    for existing in list(app_logger.handlers):
        app_logger.removeHandler(existing)
    app_logger.addHandler(handler)
