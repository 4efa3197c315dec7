# bluetraffic/errors.py


class DataLoadError(Exception):
    """
    Raised when station or trip data cannot be fetched or parsed.

    The server catches this once at startup and shows it as a load-failure
    page instead of an empty map.
    """
