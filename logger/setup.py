import logfire

from settings import LoggingSettings, logging_settings


def configure_logging(settings: LoggingSettings = logging_settings) -> logfire.Logfire:
    """Configure logfire for console output.

    Records are only shipped to the logfire backend when a token is present
    in the environment.

    Args:
        settings: Logging settings.

    Returns:
        The configured logfire instance.

    """
    console: logfire.ConsoleOptions | bool = False
    if settings.console:
        console = logfire.ConsoleOptions(min_log_level=settings.min_level)

    return logfire.configure(
        send_to_logfire="if-token-present",
        service_name=settings.service_name,
        console=console,
    )
